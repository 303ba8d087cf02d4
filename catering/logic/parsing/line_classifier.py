"""Line classifier: separates content lines from extraction noise."""
from typing import Iterable

# Ditto mark left behind for repeated table cells
DITTO = '"'


def is_junk(line: str, noise_words: Iterable[str] = ()) -> bool:
    """Return True if ``line`` carries no menu content.

    A line is junk when, once trimmed, it is empty, has no alphanumeric
    character, is a lone ditto mark, or contains one of ``noise_words``
    (lowercase substrings such as the school name).
    """
    trimmed = line.strip()
    if not trimmed:
        return True
    if not any(ch.isalnum() for ch in trimmed):
        return True
    if trimmed == DITTO:
        return True
    lower = trimmed.lower()
    return any(word in lower for word in noise_words)


def content_lines(lines: Iterable[str], noise_words: Iterable[str] = ()) -> list[str]:
    """Trimmed non-junk lines, in order."""
    noise = tuple(noise_words)
    return [line.strip() for line in lines if not is_junk(line, noise)]
