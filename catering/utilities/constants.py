from typing import Final

BREAKFAST: Final[str] = "breakfast"
BRUNCH: Final[str] = "brunch"
LUNCH: Final[str] = "lunch"
DINNER: Final[str] = "dinner"

# A header row repeats the label once per weekday column
HEADER_REPEAT_THRESHOLD: Final[int] = 3

BREAKFAST_DAYS: Final[int] = 5
LUNCH_DAYS: Final[int] = 5
DINNER_DAYS: Final[int] = 7
SATURDAY_OFFSET: Final[int] = 5
SUNDAY_OFFSET: Final[int] = 6

BRUNCH_TEXT: Final[str] = "Brunch buffet available"

DAY_NAMES: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

INVALID_DATE_MESSAGE: Final[str] = "Invalid date format. Use YYYY-MM-DD or YYYY/MM/DD."
NOT_FOUND_MESSAGE: Final[str] = "Meal not found for {date} {period}"
UPSTREAM_ERROR_MESSAGE: Final[str] = "Failed to fetch menu data: {error}"
