"""Menu index builder.

Turns one week's extracted text into ``{"YYYY-MM-DD-<period>": text}``
entries, merges several weeks into one index and answers lookups.
Provides parse_weekly_menu, build_menu_index, merge_indexes and lookup.
"""
import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

from catering.domain.MenuDocument import MenuDocument
from catering.domain.Period import Period
from catering.domain.errors import WeekPatternNotFound
from catering.logic.parsing.day_blocks import day_values
from catering.logic.parsing.section_segmenter import segment_sections
from catering.logic.weeks.dates import day_of_week, menu_key, require_week_commencing, weekday_offset
from catering.utilities.constants import (
    BRUNCH_TEXT, DINNER_DAYS, LUNCH_DAYS, SATURDAY_OFFSET, SUNDAY_OFFSET,
)

logger = logging.getLogger(__name__)

MenuIndex = Dict[str, str]


def _put_days(out: MenuIndex, week_start: date, period: Period, values: List[str]) -> None:
    for offset, text in enumerate(values):
        out[menu_key(day_of_week(week_start, offset), period.value)] = text


def parse_weekly_menu(text: str, week_start: date, noise_words: Iterable[str] = ()) -> MenuIndex:
    """Parse one week's menu text into index entries."""
    noise = tuple(noise_words)
    sections = segment_sections(text, noise)
    out: MenuIndex = {}

    _put_days(out, week_start, Period.BREAKFAST, sections.breakfast)

    if sections.brunch_saturday:
        out[menu_key(day_of_week(week_start, SATURDAY_OFFSET), Period.BRUNCH.value)] = BRUNCH_TEXT
    if sections.brunch_sunday:
        out[menu_key(day_of_week(week_start, SUNDAY_OFFSET), Period.BRUNCH.value)] = BRUNCH_TEXT

    for period, lines, days in (
        (Period.LUNCH, sections.lunch_lines, LUNCH_DAYS),
        (Period.DINNER, sections.dinner_lines, DINNER_DAYS),
    ):
        values, from_blocks = day_values(lines, days, noise)
        if not from_blocks:
            logger.debug("%s for week %s: block split mismatch, using first line per day",
                         period.value, week_start)
        _put_days(out, week_start, period, values)

    return out


def document_week_start(document: MenuDocument) -> date:
    """Declared week start, else the week-commencing phrase in the text."""
    if document.week_start is not None:
        return document.week_start
    return require_week_commencing(document.text, document.source)


def merge_indexes(week_maps: Iterable[MenuIndex]) -> MenuIndex:
    """Merge per-week maps in order; later maps win on key collision."""
    index: MenuIndex = {}
    for week_map in week_maps:
        index.update(week_map)
    return index


def build_menu_index(documents: Iterable[MenuDocument], noise_words: Iterable[str] = ()) -> MenuIndex:
    noise = tuple(noise_words)
    week_maps: List[MenuIndex] = []
    for document in documents:
        logger.info("Processing %s", document.source or "<inline document>")
        try:
            week_start = document_week_start(document)
        except WeekPatternNotFound as e:
            logger.warning("Skipping - could not parse week start date (%s)", e)
            continue
        logger.info("Week starting: %s", week_start)
        week_map = parse_weekly_menu(document.text, week_start, noise)
        for key, value in week_map.items():
            logger.debug("Storing key: %s -> %r", key, value)
        week_maps.append(week_map)

    index = merge_indexes(week_maps)
    logger.info("Total entries in index: %d", len(index))
    logger.info("Sample keys: %s", sorted(index)[:5])
    return index


def lookup(index: MenuIndex, requested: date, period: str,
           resolved_week_start: Optional[date] = None) -> Optional[str]:
    """Find the meal for ``requested``/``period``.

    Falls back to the same weekday inside ``resolved_week_start`` when the
    requested date itself has no entry.
    """
    period_key = period.lower()
    meal = index.get(menu_key(requested, period_key))
    if meal is not None or resolved_week_start is None:
        return meal
    mapped_date = day_of_week(resolved_week_start, weekday_offset(requested))
    return index.get(menu_key(mapped_date, period_key))
