"""Front-matter detection and extraction.

Priority chain (first block that decodes wins, results are never merged):
    YAML (``---``) → TOML (``+++``) → leading JSON object

A dialect whose delimiters are found but whose block fails to decode simply
falls through to the next dialect.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from collections.abc import Callable
from typing import Any

import yaml

from metagen.errors import ExtractionError, JsonError, MetadataError, TomlError, YamlError
from metagen.extractors.flatten import flatten_value
from metagen.items import Metadata
from metagen.settings import NO_FRONT_MATTER_MESSAGE, TOML_DELIMITER, YAML_DELIMITER

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Block location
# ---------------------------------------------------------------------------

def _block_re(delimiter: str) -> re.Pattern[str]:
    d = re.escape(delimiter)
    return re.compile(
        rf"\A\s*{d}[ \t]*\r?\n(.*?)^[ \t]*{d}[ \t]*\r?$",
        re.DOTALL | re.MULTILINE,
    )


_YAML_BLOCK_RE = _block_re(YAML_DELIMITER)
_TOML_BLOCK_RE = _block_re(TOML_DELIMITER)


def find_block(content: str, pattern: re.Pattern[str]) -> str | None:
    """Return the text between the first delimiter pair, or None."""
    match = pattern.match(content)
    if match is None:
        return None
    return match.group(1)


# ---------------------------------------------------------------------------
# Decoders (raise the wrapped error of their dialect)
# ---------------------------------------------------------------------------

_BOOL_TAG = "tag:yaml.org,2002:bool"


class CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader that treats only ``true``/``false`` as booleans.

    ``yes``, ``no``, ``on`` and ``off`` stay plain strings, as in YAML 1.2.
    """


CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreSchemaLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _require_mapping(value: Any, dialect: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(
            f"{dialect} front matter must be a mapping, got {type(value).__name__}",
        )
    return value


def decode_yaml_block(block: str) -> dict[str, str]:
    """Decode a YAML block and flatten it."""
    if not block.strip():
        return {}
    try:
        data = _require_mapping(yaml.load(block, Loader=CoreSchemaLoader), "YAML")
    except yaml.YAMLError as exc:
        raise YamlError(exc) from exc
    except TypeError as exc:
        raise YamlError(str(exc)) from exc
    try:
        return flatten_value(data)
    except ValueError as exc:
        raise YamlError(str(exc)) from exc


def decode_toml_block(block: str) -> dict[str, str]:
    """Decode a TOML block and flatten it."""
    try:
        data = tomllib.loads(block)
    except tomllib.TOMLDecodeError as exc:
        raise TomlError(exc) from exc
    return flatten_value(data)


def decode_json_object(content: str) -> dict[str, str]:
    """Decode the JSON object that opens *content*.

    Only top-level string fields with a non-empty key are kept; everything
    else is dropped and nothing is flattened.
    """
    start = len(content) - len(content.lstrip())
    if not content.startswith("{", start):
        raise JsonError("content does not start with an object")
    try:
        data, _end = json.JSONDecoder().raw_decode(content, start)
    except json.JSONDecodeError as exc:
        raise JsonError(exc) from exc
    if not isinstance(data, dict):
        raise JsonError(f"expected an object, got {type(data).__name__}")
    return {key: value for key, value in data.items() if key and isinstance(value, str)}


# ---------------------------------------------------------------------------
# Per-dialect extraction
# ---------------------------------------------------------------------------

def _try(dialect: str, decode: Callable[[str], dict[str, str]], text: str) -> Metadata | None:
    try:
        return Metadata(decode(text))
    except MetadataError as exc:
        logger.debug("%s front matter rejected: %s", dialect, exc)
        return None


def extract_yaml_metadata(content: str) -> Metadata | None:
    block = find_block(content, _YAML_BLOCK_RE)
    if block is None:
        return None
    return _try("YAML", decode_yaml_block, block)


def extract_toml_metadata(content: str) -> Metadata | None:
    block = find_block(content, _TOML_BLOCK_RE)
    if block is None:
        return None
    return _try("TOML", decode_toml_block, block)


def extract_json_metadata(content: str) -> Metadata | None:
    if not content.lstrip().startswith("{"):
        return None
    return _try("JSON", decode_json_object, content)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_metadata(content: str) -> Metadata:
    """Extract and flatten the front matter of *content*.

    Raises:
        ExtractionError: when no dialect yields a decodable block.
    """
    for extractor in (extract_yaml_metadata, extract_toml_metadata, extract_json_metadata):
        metadata = extractor(content)
        if metadata is not None:
            return metadata
    raise ExtractionError(NO_FRONT_MATTER_MESSAGE)
