from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"
PLACEHOLDER_IMAGE = "https://via.placeholder.com/500x750?text=No+Image"


def image_url(path: Optional[str], size: str = "w500") -> str:
    if not path:
        return PLACEHOLDER_IMAGE
    return f"{TMDB_IMAGE_BASE}/{size}{path}"


def format_date(value: Optional[str]) -> str:
    """Render YYYY-MM-DD as "Month D, YYYY". Unparseable input is passed through."""
    if not value:
        return "Unknown"
    try:
        parsed = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_rating(value: Optional[float]) -> str:
    if not value:
        return "N/A"
    # ties round up, 7.25 -> "7.3"
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_money(amount: Optional[int]) -> Optional[str]:
    # zero budget/revenue means TMDB has no figure
    if not amount:
        return None
    return f"${amount:,}"


def format_runtime(minutes: Optional[int]) -> Optional[str]:
    if not minutes:
        return None
    return f"{minutes} min"


def release_year(value: Optional[str]) -> Optional[int]:
    if value and len(value) >= 4 and value[:4].isdigit():
        return int(value[:4])
    return None
