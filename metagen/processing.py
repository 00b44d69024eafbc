"""Metadata normalization: canonical dates, required fields, derived slug."""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Mapping

import dateparser
from dateutil.parser import isoparse

from metagen.errors import DateParseError, MissingFieldError
from metagen.items import Metadata
from metagen.settings import (
    CANONICAL_DATE_FORMAT,
    CUSTOM_DATE_FORMATS,
    MIN_DATE_LENGTH,
    REQUIRED_FIELDS,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def _reorder_day_first(date: str) -> str:
    """Rewrite ``DD/MM/YYYY`` as ``YYYY-MM-DD``."""
    parts = date.split("/")
    if len(parts) == 3 and [len(p) for p in parts] == [2, 2, 4]:
        day, month, year = parts
        return f"{year}-{month}-{day}"
    raise DateParseError("Invalid DD/MM/YYYY date format.", value=date)


def _parse_custom(date: str, fmt: str) -> dt.datetime | None:
    return dateparser.parse(
        date,
        date_formats=[fmt],
        languages=["en"],
        settings={"PARSERS": ["custom-formats"]},
    )


def _parse_date(date: str) -> dt.datetime:
    try:
        return isoparse(date)
    except (ValueError, OverflowError) as exc:
        cause = str(exc)

    for fmt in CUSTOM_DATE_FORMATS:
        try:
            parsed = _parse_custom(date, fmt)
        except (ValueError, OverflowError) as exc:
            cause = str(exc)
            continue
        if parsed is not None:
            logger.debug("Parsed date %r with pattern %s", date, fmt)
            return parsed

    raise DateParseError(
        f"{date!r} does not match any supported format ({cause})",
        value=date,
        cause=cause,
    )


def standardize_date(date: str) -> str:
    """Return *date* as a zero-padded ``YYYY-MM-DD`` string.

    Accepted inputs, tried in order: ISO-8601 / RFC-3339 timestamps,
    ``YYYY-MM-DD`` and ``MM/DD/YYYY``.  A ten-character value with slashes is
    always read as ``DD/MM/YYYY`` first.

    Raises:
        DateParseError: for empty, too short or unrecognised values.
    """
    if not date.strip():
        raise DateParseError("Date string is empty.", value=date)
    if len(date) < MIN_DATE_LENGTH:
        raise DateParseError("Date string is too short.", value=date)

    if "/" in date and len(date) == 10:
        date = _reorder_day_first(date)

    parsed = _parse_date(date)
    return CANONICAL_DATE_FORMAT.format(year=parsed.year, month=parsed.month, day=parsed.day)


# ---------------------------------------------------------------------------
# Required and derived fields
# ---------------------------------------------------------------------------

def ensure_required_fields(metadata: Mapping[str, str]) -> None:
    """Raise :class:`MissingFieldError` for the first absent required field."""
    for field in REQUIRED_FIELDS:
        if field not in metadata:
            raise MissingFieldError(field)


def generate_slug(title: str) -> str:
    """Lowercase *title* and turn every space into a hyphen; nothing else."""
    return title.lower().replace(" ", "-")


def generate_derived_fields(metadata: Metadata) -> None:
    """Add ``slug`` from ``title`` unless the document already supplies one."""
    if "slug" not in metadata and "title" in metadata:
        metadata.insert("slug", generate_slug(metadata["title"]))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def process_metadata(metadata: Mapping[str, str]) -> Metadata:
    """Return a normalized copy of *metadata*; the input is left untouched.

    Raises:
        DateParseError: when ``date`` is present but unparseable.
        MissingFieldError: when ``title`` or ``date`` is missing.
    """
    processed = Metadata(metadata)

    if "date" in processed:
        processed.insert("date", standardize_date(processed["date"]))

    ensure_required_fields(processed)
    generate_derived_fields(processed)
    return processed
