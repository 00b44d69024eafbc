"""Static configuration for metagen.

Everything here is a plain module-level constant.  Callers that need
different behaviour pass explicit arguments; the CLI layers YAML profiles
(see :mod:`metagen.profiles`) on top of these defaults.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Front-matter delimiters
# ---------------------------------------------------------------------------
YAML_DELIMITER = "---"
TOML_DELIMITER = "+++"

NO_FRONT_MATTER_MESSAGE = "No valid front matter found."

# ---------------------------------------------------------------------------
# Processing
# ---------------------------------------------------------------------------
# Checked in this order; only the first missing field is reported.
REQUIRED_FIELDS: tuple[str, ...] = ("title", "date")

# Anything shorter cannot hold a day, a month and a four-digit year.
MIN_DATE_LENGTH = 8

# Fallback patterns tried after the ISO-8601 parse, in order.
CUSTOM_DATE_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%m/%d/%Y")

CANONICAL_DATE_FORMAT = "{year:04d}-{month:02d}-{day:02d}"

# ---------------------------------------------------------------------------
# Meta-tag allow-lists (declared order is output order)
# ---------------------------------------------------------------------------
APPLE_TAGS: tuple[str, ...] = (
    "apple-mobile-web-app-capable",
    "apple-mobile-web-app-status-bar-style",
    "apple-mobile-web-app-title",
)

PRIMARY_TAGS: tuple[str, ...] = (
    "author",
    "description",
    "keywords",
    "viewport",
)

OG_TAGS: tuple[str, ...] = (
    "og:title",
    "og:description",
    "og:image",
    "og:url",
    "og:type",
)

MS_TAGS: tuple[str, ...] = (
    "msapplication-TileColor",
    "msapplication-TileImage",
)

TWITTER_TAGS: tuple[str, ...] = (
    "twitter:card",
    "twitter:site",
    "twitter:title",
    "twitter:description",
    "twitter:image",
)

# ---------------------------------------------------------------------------
# Meta-tag scraping
# ---------------------------------------------------------------------------
META_SELECTOR = "meta"
META_NAME_ATTRIBUTES: tuple[str, ...] = ("name", "property", "http-equiv")
HTML_PARSER = "lxml"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
