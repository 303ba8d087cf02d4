"""Menu service: fetches published weeks, keeps the merged index and answers meal queries.

Documents are downloaded concurrently; each week is parsed into its own map
and the maps are merged in one place. The merged index is cached in memory
for ``ttl_seconds``.
"""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import date, timedelta
from functools import lru_cache
from typing import Callable, Dict, List, Optional

from catering.domain.MenuDocument import MenuLink, WeekCandidate
from catering.domain.Period import Period
from catering.domain.errors import LookupMiss, MenuSourceError
from catering.infra.Menu_Repository import MenuRepository
from catering.logic.index.menu_index_builder import MenuIndex, build_menu_index, lookup
from catering.logic.weeks.dates import format_date, menu_key, parse_week_commencing
from catering.logic.weeks.week_resolver import choose_week
from catering.utilities.config import MENU_CACHE_TTL_SECONDS, MENU_NOISE_WORDS

logger = logging.getLogger(__name__)


@dataclass
class MenuSnapshot:
    candidates: List[WeekCandidate]
    index: MenuIndex
    built_at: float = 0.0

    @property
    def week_starts(self) -> List[date]:
        return sorted({c.week_start for c in self.candidates})


@dataclass
class WeekMenu:
    week_start: date
    exact: bool
    entries: Dict[str, str] = field(default_factory=dict)


class MenuService:
    def __init__(self, repository: Optional[MenuRepository] = None,
                 ttl_seconds: float = MENU_CACHE_TTL_SECONDS,
                 noise_words=MENU_NOISE_WORDS,
                 today_provider: Callable[[], date] = date.today,
                 clock: Callable[[], float] = time.monotonic):
        self.repository = repository or MenuRepository()
        self.ttl_seconds = ttl_seconds
        self.noise_words = tuple(noise_words)
        self.today_provider = today_provider
        self.clock = clock
        self._snapshot: Optional[MenuSnapshot] = None
        self._lock = asyncio.Lock()

    # -------------------- Loading --------------------
    async def _load_link(self, link: MenuLink) -> Optional[WeekCandidate]:
        if link.week_start is not None:
            text = await self.repository.download_text(link.url)
            return WeekCandidate(link.week_start, link.url, text)

        # No date in the link text: look inside the document itself
        try:
            text = await self.repository.download_text(link.url)
        except MenuSourceError as e:
            logger.warning("Skipping %s: %s", link.url, e)
            return None
        week_start = parse_week_commencing(text)
        if week_start is None:
            logger.warning("Skipping %s - could not parse week start date", link.url)
            return None
        return WeekCandidate(week_start, link.url, text)

    async def load_candidates(self) -> List[WeekCandidate]:
        links = await self.repository.fetch_menu_links()
        results = await asyncio.gather(*(self._load_link(link) for link in links))
        return [candidate for candidate in results if candidate is not None]

    async def refresh(self) -> MenuSnapshot:
        candidates = await self.load_candidates()
        index = build_menu_index((c.to_document() for c in candidates), self.noise_words)
        self._snapshot = MenuSnapshot(candidates, index, self.clock())
        return self._snapshot

    def _is_fresh(self) -> bool:
        return (self._snapshot is not None
                and self.clock() - self._snapshot.built_at < self.ttl_seconds)

    async def get_snapshot(self) -> MenuSnapshot:
        if self._is_fresh():
            return self._snapshot
        async with self._lock:
            if self._is_fresh():
                return self._snapshot
            return await self.refresh()

    # -------------------- Queries --------------------
    async def resolve_week(self, requested: date) -> tuple[MenuSnapshot, Optional[date]]:
        snapshot = await self.get_snapshot()
        week_start = choose_week(snapshot.week_starts, requested, self.today_provider())
        return snapshot, week_start

    async def get_meal(self, requested: date, period: str) -> str:
        period = period.lower()
        snapshot, week_start = await self.resolve_week(requested)
        meal = lookup(snapshot.index, requested, period, week_start) if week_start is not None else None
        if meal is None:
            raise LookupMiss(format_date(requested), period)
        return meal

    async def get_week(self, requested: date) -> WeekMenu:
        snapshot, week_start = await self.resolve_week(requested)
        if week_start is None:
            raise LookupMiss(format_date(requested), "week")
        entries = {}
        for offset in range(7):
            day = week_start + timedelta(days=offset)
            for period in Period:
                key = menu_key(day, period.value)
                if key in snapshot.index:
                    entries[key] = snapshot.index[key]
        exact = week_start <= requested <= week_start + timedelta(days=6)
        return WeekMenu(week_start, exact, entries)


@lru_cache(maxsize=1)
def get_menu_service() -> MenuService:
    """Process-wide service used by the API."""
    return MenuService()
