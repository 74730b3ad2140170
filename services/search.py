from typing import Iterable, List, Optional

from services.indexer import AudioEntry

DIR_PREFIX = "dir:"


def parse_dir_filter(search_text: str) -> Optional[str]:
    """Return the folder name targeted by a `dir:` query, or None for a plain text query."""
    if not search_text.startswith(DIR_PREFIX):
        return None
    target = search_text[len(DIR_PREFIX):].strip()
    # Remove one leading ./ if present
    if target.startswith("./"):
        target = target[2:]
    return target


def matches_text(entry: AudioEntry, needle: str) -> bool:
    """Case-insensitive substring match on name, path or folder. needle must be lower-cased."""
    return (
        needle in entry.name.lower()
        or needle in entry.path.lower()
        or needle in entry.folder.lower()
    )


def filter_entries(entries: Iterable[AudioEntry], search_text: Optional[str] = None) -> List[AudioEntry]:
    """
    Apply a listing search to indexed entries.

    - empty search: everything passes
    - `dir:<folder>`: exact match on the immediate parent folder name;
      `dir:` alone selects files directly in the root
    - anything else: case-insensitive substring match
    """
    search_text = (search_text or "").strip()
    if not search_text:
        return list(entries)

    dir_filter = parse_dir_filter(search_text)
    if dir_filter is not None:
        return [entry for entry in entries if entry.folder == dir_filter]

    needle = search_text.lower()
    return [entry for entry in entries if matches_text(entry, needle)]
