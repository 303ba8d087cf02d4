"""Section segmenter: partitions extracted menu text into meal-period regions.

The menu PDF is a table whose header rows repeat the period name once per
day column ("Breakfast Breakfast Breakfast ..."). A single pass walks the
lines, switches state on header rows and collects what each period needs:

- breakfast: the first content line for each weekday, Monday to Friday
- brunch: whether Saturday's and Sunday's sections carried any content
- lunch / dinner: every raw line, left for the day-block splitter

Lines seen before the first header are discarded.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from catering.logic.parsing.line_classifier import is_junk
from catering.utilities.constants import (
    BREAKFAST, BRUNCH, LUNCH, DINNER,
    BREAKFAST_DAYS, HEADER_REPEAT_THRESHOLD,
)


class SectionState(Enum):
    NONE = "none"
    BREAKFAST = "breakfast"
    BRUNCH_SAT = "brunch_sat"
    BRUNCH_SUN = "brunch_sun"
    LUNCH = "lunch"
    DINNER = "dinner"


@dataclass
class SegmentedMenu:
    breakfast: list[str] = field(default_factory=list)
    brunch_saturday: bool = False
    brunch_sunday: bool = False
    lunch_lines: list[str] = field(default_factory=list)
    dinner_lines: list[str] = field(default_factory=list)


def header_counts(line: str) -> dict[str, int]:
    lower = line.lower()
    return {name: lower.count(name) for name in (BREAKFAST, BRUNCH, LUNCH, DINNER)}


def next_state(state: SectionState, line: str) -> SectionState | None:
    """Return the state a header ``line`` switches to, or None for a content line."""
    counts = header_counts(line)
    if counts[BREAKFAST] >= HEADER_REPEAT_THRESHOLD:
        return SectionState.BREAKFAST
    if counts[BRUNCH] >= 1:
        if state is SectionState.BRUNCH_SAT:
            return SectionState.BRUNCH_SUN
        return SectionState.BRUNCH_SAT
    if counts[LUNCH] >= HEADER_REPEAT_THRESHOLD:
        return SectionState.LUNCH
    if counts[DINNER] >= HEADER_REPEAT_THRESHOLD:
        return SectionState.DINNER
    return None


def segment_sections(text: str, noise_words: Iterable[str] = ()) -> SegmentedMenu:
    noise = tuple(noise_words)
    result = SegmentedMenu()
    state = SectionState.NONE

    for line in text.splitlines():
        switched = next_state(state, line)
        if switched is not None:
            state = switched
            continue

        # Lunch and dinner keep junk too; the splitter needs raw indentation
        if state is SectionState.LUNCH:
            result.lunch_lines.append(line)
            continue
        if state is SectionState.DINNER:
            result.dinner_lines.append(line)
            continue

        if is_junk(line, noise):
            continue

        if state is SectionState.BREAKFAST:
            if len(result.breakfast) < BREAKFAST_DAYS:
                result.breakfast.append(line.strip())
        elif state is SectionState.BRUNCH_SAT:
            result.brunch_saturday = True
        elif state is SectionState.BRUNCH_SUN:
            result.brunch_sunday = True

    return result
