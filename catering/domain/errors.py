"""Exceptions raised by the menu engine and its collaborators."""


class DateParseError(ValueError):
    """Query date is not three numeric parts forming a real calendar date."""

    def __init__(self, raw: str):
        super().__init__(f"Invalid date: {raw!r}")
        self.raw = raw


class WeekPatternNotFound(LookupError):
    """Document text carries no recognisable week-commencing phrase."""

    def __init__(self, source: str = ""):
        super().__init__(f"No week commencing date found in {source or 'document'}")
        self.source = source


class LookupMiss(LookupError):
    """No menu entry exists for the requested date and period."""

    def __init__(self, date_key: str, period: str):
        super().__init__(f"{date_key} {period}")
        self.date_key = date_key
        self.period = period


class MenuSourceError(RuntimeError):
    """Fetching or extracting an upstream menu document failed."""
