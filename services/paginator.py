import re
from typing import List, Optional

from pydantic import BaseModel

from services.indexer import AudioEntry
from utils.constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, MAX_PER_PAGE


_INT_RE = re.compile(r"[+-]?[0-9]+")

# Values outside a signed 64-bit integer fall back to the default
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1


class ListingResult(BaseModel):
    files: List[AudioEntry]
    page: int
    perPage: int
    total: int
    totalPages: int


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or not _INT_RE.fullmatch(raw):
        return None
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def parse_page(raw: Optional[str]) -> int:
    """Page number from a query parameter; anything but a positive integer falls back to 1."""
    value = _parse_int(raw)
    if value is None or value < 1:
        return DEFAULT_PAGE
    return value


def parse_per_page(raw: Optional[str]) -> int:
    """Page size from a query parameter; values outside [1, 1000] fall back to 200."""
    value = _parse_int(raw)
    if value is None or value < 1 or value > MAX_PER_PAGE:
        return DEFAULT_PER_PAGE
    return value


def total_pages(total: int, per_page: int) -> int:
    return (total + per_page - 1) // per_page


def paginate(entries: List[AudioEntry], page: int, per_page: int) -> ListingResult:
    """Sort entries by name and cut out one page. Out-of-range pages come back empty."""
    ordered = sorted(entries, key=lambda entry: entry.name)

    total = len(ordered)
    start = (page - 1) * per_page
    if start >= total:
        start = end = total
    else:
        end = min(start + per_page, total)

    return ListingResult(
        files=ordered[start:end],
        page=page,
        perPage=per_page,
        total=total,
        totalPages=total_pages(total, per_page),
    )
