"""Configuration management for the catering menu API."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _split_words(raw: str) -> tuple[str, ...]:
    return tuple(w.strip().lower() for w in raw.split(',') if w.strip())


# Menu source
CATERING_PAGE_URL: Final[str] = os.getenv(
    'CATERING_PAGE_URL',
    'https://www.cranbrookschool.co.uk/school-information/cranbrook-catering/',
)
CATERING_BASE_URL: Final[str] = os.getenv('CATERING_BASE_URL', 'https://www.cranbrookschool.co.uk/')
CATERING_USER_AGENT: Final[str] = os.getenv('CATERING_USER_AGENT', 'cranbrook-catering-api/0.1')
HTTP_TIMEOUT_SECONDS: Final[float] = float(os.getenv('HTTP_TIMEOUT_SECONDS', '20'))

# Parsing
MENU_CACHE_TTL_SECONDS: Final[int] = int(os.getenv('MENU_CACHE_TTL_SECONDS', '3600'))
MENU_NOISE_WORDS: Final[tuple[str, ...]] = _split_words(os.getenv('MENU_NOISE_WORDS', ''))
PDF_LAYOUT_TEXT: Final[bool] = os.getenv('PDF_LAYOUT_TEXT', 'True').lower() == 'true'

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '3000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
