"""metagen.api - one-call extraction, keyword and meta-tag preparation.

Basic usage::

    from metagen.api import extract_and_prepare_metadata

    metadata, keywords, tags = extract_and_prepare_metadata(text)
    print(metadata["title"])
    print(tags.primary)

From a file (inside a running event loop)::

    metadata, keywords, tags = await async_extract_metadata_from_file("post.md")
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path

from metagen.errors import DecodeError, FileReadError
from metagen.extractors.frontmatter import extract_metadata
from metagen.extractors.metatags import generate_metatags
from metagen.items import MetaTagGroups
from metagen.processing import process_metadata

logger = logging.getLogger(__name__)

MetadataMap = dict[str, str]
Keywords = list[str]
MetadataResult = tuple[MetadataMap, Keywords, MetaTagGroups]


def extract_keywords(metadata: Mapping[str, str]) -> Keywords:
    """Split the ``keywords`` value on commas and strip each piece.

    Commas are never treated as escaped and empty pieces are kept.
    """
    raw = metadata.get("keywords")
    if raw is None:
        return []
    return [piece.strip() for piece in raw.split(",")]


def extract_and_prepare_metadata(content: str, *, process: bool = False) -> MetadataResult:
    """Extract front matter from *content* and derive keywords and meta tags.

    Args:
        content: Document text starting with a front-matter block.
        process: Run :func:`~metagen.processing.process_metadata` (date
                 normalization, required fields, slug) before deriving.

    Raises:
        MetadataError: any extraction or processing failure.
    """
    metadata = extract_metadata(content)
    if process:
        metadata = process_metadata(metadata)
    metadata_map = metadata.to_dict()
    return metadata_map, extract_keywords(metadata_map), generate_metatags(metadata_map)


def _read_text(path: str) -> str:
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise FileReadError.from_os_error(exc, path) from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(exc).context(path) from exc


async def async_extract_metadata_from_file(
    file_path: str,
    *,
    process: bool = False,
) -> MetadataResult:
    """Read *file_path* and run :func:`extract_and_prepare_metadata` on it.

    An empty or whitespace-only file yields empty results rather than an
    error.

    Raises:
        FileReadError: the file could not be opened or read.
        DecodeError:   the file is not valid UTF-8.
        MetadataError: extraction or processing failed.
    """
    content = await asyncio.to_thread(_read_text, file_path)
    logger.info("Read %d characters from %s", len(content), file_path)

    if not content.strip():
        return {}, [], MetaTagGroups()

    return extract_and_prepare_metadata(content, process=process)
