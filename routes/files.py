from fastapi import APIRouter, Depends, HTTPException
from pathlib import Path
from typing import Optional

from services.listing import build_listing
from services.paginator import ListingResult, parse_page, parse_per_page
from utils.config import get_audio_dir
from utils.errors import ScanError

router = APIRouter()


# Plain `def` so the directory walk runs in the threadpool
@router.get("/files", response_model=ListingResult)
def list_audio_files(
    page: Optional[str] = None,
    perPage: Optional[str] = None,
    search: Optional[str] = None,
    audio_dir: Path = Depends(get_audio_dir),
):
    """List one page of audio files under the root, optionally filtered by `search`."""
    try:
        return build_listing(
            audio_dir,
            page=parse_page(page),
            per_page=parse_per_page(perPage),
            search=(search or "").strip(),
        )
    except ScanError as e:
        raise HTTPException(status_code=500, detail=str(e))
