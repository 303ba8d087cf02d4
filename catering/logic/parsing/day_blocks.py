"""Day-block splitter.

Rebuilds per-day columns from a lunch/dinner table that text extraction has
flattened into lines. A line with leading whitespace is taken as the first
cell of the next day's column; unindented lines are wrapped continuations of
the current day.

This is a property of how the PDF text extractor happens to indent cells,
not a real column parser. Character positions from the original layout are
gone by the time text gets here, so a mismatch in block count falls back to
one line per day instead of guessing.
"""
from typing import Iterable

from catering.logic.parsing.line_classifier import content_lines, is_junk


def split_blocks(lines: Iterable[str], expected_block_count: int,
                 noise_words: Iterable[str] = ()) -> list[list[str]]:
    """Group ``lines`` into at most ``expected_block_count`` ordered day blocks."""
    noise = tuple(noise_words)
    blocks: list[list[str]] = []
    for raw in lines:
        if is_junk(raw, noise):
            continue
        starts_new = raw[:1].isspace() and bool(blocks) and len(blocks) < expected_block_count
        if starts_new or not blocks:
            blocks.append([])
        blocks[-1].append(raw.strip())
    return blocks


def fill_first_line_per_day(lines: Iterable[str], days: int,
                            noise_words: Iterable[str] = ()) -> list[str]:
    """Positional fallback: the n-th content line becomes day n's entry."""
    return content_lines(lines, noise_words)[:days]


def day_values(lines: list[str], days: int, noise_words: Iterable[str] = ()) -> tuple[list[str], bool]:
    """Per-day texts for a table section and whether the block split was trusted."""
    noise = tuple(noise_words)
    blocks = split_blocks(lines, days, noise)
    if len(blocks) == days:
        return ["\n".join(block) for block in blocks], True
    return fill_first_line_per_day(lines, days, noise), False
