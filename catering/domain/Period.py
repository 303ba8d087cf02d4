"""Period domain entity: the named meal services a weekly menu is split into."""
from enum import Enum

from catering.utilities.constants import BREAKFAST, BRUNCH, LUNCH, DINNER


class Period(str, Enum):
    BREAKFAST = BREAKFAST
    BRUNCH = BRUNCH
    LUNCH = LUNCH
    DINNER = DINNER
