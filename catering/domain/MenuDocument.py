"""Menu document entities: discovered links, extracted documents and week candidates."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class MenuLink:
    url: str
    week_start: Optional[date] = None
    label: str = ""


@dataclass(frozen=True)
class MenuDocument:
    """Raw text of one weekly menu plus the week it declares (a Monday), if known."""
    text: str
    week_start: Optional[date] = None
    source: str = ""


@dataclass(frozen=True)
class WeekCandidate:
    week_start: date
    link: str
    text: Optional[str] = None

    def to_document(self) -> MenuDocument:
        return MenuDocument(text=self.text or "", week_start=self.week_start, source=self.link)
