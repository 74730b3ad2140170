import logging
from pathlib import Path
from typing import Optional

from services.indexer import index_audio_files
from services.paginator import ListingResult, paginate
from services.search import filter_entries

logger = logging.getLogger(__name__)


def build_listing(root: Path, page: int, per_page: int, search: Optional[str] = None) -> ListingResult:
    """Index the audio root, apply the search and return the requested page."""
    entries = index_audio_files(root)
    matching = filter_entries(entries, search)
    result = paginate(matching, page, per_page)
    logger.debug(
        f"Listing {root}: {len(entries)} indexed, {result.total} matching "
        f"search={search!r}, page {result.page}/{result.totalPages}"
    )
    return result
