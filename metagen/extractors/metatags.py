"""Meta-tag generation from flat metadata and meta-tag scraping from HTML."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import soupsieve
from bs4 import BeautifulSoup, Tag

from metagen.errors import ExtractionError
from metagen.items import MetaTag, MetaTagGroups, generate_tags
from metagen.settings import HTML_PARSER, META_NAME_ATTRIBUTES, META_SELECTOR

logger = logging.getLogger(__name__)

__all__ = [
    "extract_meta_tags",
    "generate_metatags",
    "generate_tags",
    "meta_tags_to_dict",
]

# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

def generate_metatags(metadata: Mapping[str, str]) -> MetaTagGroups:
    """Render the allow-listed tags present in *metadata*, grouped by platform."""
    groups = MetaTagGroups()
    groups.generate_apple_meta_tags(metadata)
    groups.generate_primary_meta_tags(metadata)
    groups.generate_og_meta_tags(metadata)
    groups.generate_ms_meta_tags(metadata)
    groups.generate_twitter_meta_tags(metadata)
    return groups


# ---------------------------------------------------------------------------
# Scraping
# ---------------------------------------------------------------------------

def _attr(tag: Tag, name: str) -> str | None:
    """Return attribute *name* as a str (BeautifulSoup may hand back a list)."""
    val: Any = tag.get(name)
    if val is None:
        return None
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def _resolve_name(tag: Tag) -> str | None:
    for attr in META_NAME_ATTRIBUTES:
        value = _attr(tag, attr)
        if value is not None:
            return value
    return None


def extract_meta_tags(html: str, selector: str = META_SELECTOR) -> list[MetaTag]:
    """Return every ``<meta>`` element of *html* as a :class:`MetaTag`.

    The name comes from the first of ``name``, ``property`` or
    ``http-equiv`` that is present.  Elements without a name or without a
    ``content`` attribute are skipped.  Document order and duplicates are
    preserved.

    Raises:
        ExtractionError: if *selector* is not a valid CSS selector.
    """
    soup = BeautifulSoup(html, HTML_PARSER)
    try:
        elements = soup.select(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise ExtractionError(f"Failed to create meta tag selector: {exc}") from exc

    tags: list[MetaTag] = []
    for element in elements:
        name = _resolve_name(element)
        content = _attr(element, "content")
        if name is None or content is None:
            logger.debug("Skipping incomplete meta element: %s", element)
            continue
        tags.append(MetaTag(name=name, content=content))
    return tags


def meta_tags_to_dict(meta_tags: Iterable[MetaTag]) -> dict[str, str]:
    """Map tag names to contents; later duplicates overwrite earlier ones."""
    return {tag.name: tag.content for tag in meta_tags}
