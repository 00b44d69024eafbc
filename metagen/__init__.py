"""metagen - front-matter metadata extraction and HTML meta-tag generation.

Quick usage::

    from metagen import extract_and_prepare_metadata

    metadata, keywords, tags = extract_and_prepare_metadata(text)
    print(metadata["title"])
    print(tags.og)

Normalization (canonical date, required fields, slug)::

    from metagen import extract_metadata, process_metadata

    processed = process_metadata(extract_metadata(text))
    print(processed["slug"])

Scraping existing pages::

    from metagen import extract_meta_tags

    for tag in extract_meta_tags(html):
        print(tag.name, tag.content)
"""

from metagen.api import (
    async_extract_metadata_from_file,
    extract_and_prepare_metadata,
    extract_keywords,
)
from metagen.errors import (
    DateParseError,
    ExtractionError,
    MetadataError,
    MissingFieldError,
)
from metagen.extractors.frontmatter import extract_metadata
from metagen.extractors.metatags import extract_meta_tags, generate_metatags, meta_tags_to_dict
from metagen.items import Metadata, MetaTag, MetaTagGroups
from metagen.processing import process_metadata
from metagen.utils import escape_html, unescape_html

__version__ = "0.1.0"
__all__ = [
    "DateParseError",
    "ExtractionError",
    "MetaTag",
    "MetaTagGroups",
    "Metadata",
    "MetadataError",
    "MissingFieldError",
    "async_extract_metadata_from_file",
    "escape_html",
    "extract_and_prepare_metadata",
    "extract_keywords",
    "extract_meta_tags",
    "extract_metadata",
    "generate_metatags",
    "meta_tags_to_dict",
    "process_metadata",
    "unescape_html",
]
