"""Convert decoded YAML / TOML documents into a flat ``dotted.path -> str`` map.

Both decoders hand back plain Python containers, so they are first turned
into one :class:`Node` tree and flattened by a single algorithm:

* mapping  -> recurse, appending ``.<key>`` to the path
* sequence -> stop recursing; store ``"[a, b, c]"`` built from the scalar
  elements (nested containers inside a sequence are skipped)
* scalar   -> store its string form at the current path

The JSON dialect never goes through here; see
:func:`metagen.extractors.frontmatter.extract_json_metadata`.
"""

from __future__ import annotations

import datetime as dt
import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


class NodeKind(enum.Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


@dataclass(frozen=True)
class Node:
    """One node of a decoded front-matter tree.

    Only the field matching :attr:`kind` is meaningful: ``entries`` for
    mappings (ordered key/child pairs), ``items`` for sequences and ``text``
    for scalars.
    """

    kind: NodeKind
    entries: tuple[tuple[str, Node], ...] = field(default=())
    items: tuple[Node, ...] = field(default=())
    text: str = ""

    @classmethod
    def scalar(cls, text: str) -> Node:
        return cls(NodeKind.SCALAR, text=text)


# ---------------------------------------------------------------------------
# Scalar rendering
# ---------------------------------------------------------------------------

def scalar_to_str(value: Any) -> str:
    """Return the string form stored for a scalar value.

    Booleans use their lowercase YAML/TOML spelling, ``None`` becomes the
    empty string and date/time values use ISO-8601, with UTC written as ``Z``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dt.datetime) and value.utcoffset() == dt.timedelta(0):
        return value.replace(tzinfo=None).isoformat() + "Z"
    if isinstance(value, (dt.date, dt.time)):
        # datetime is a date subclass
        return value.isoformat()
    return str(value)


# ---------------------------------------------------------------------------
# Tree construction
# ---------------------------------------------------------------------------

def build_node(value: Any, _ancestors: frozenset[int] = frozenset()) -> Node:
    """Build a :class:`Node` tree from a decoded YAML or TOML value.

    Raises:
        ValueError: if a container contains itself (YAML anchors allow this).
    """
    if not isinstance(value, (Mapping, list, tuple)):
        return Node.scalar(scalar_to_str(value))

    if id(value) in _ancestors:
        raise ValueError("recursive structure cannot be flattened")
    ancestors = _ancestors | {id(value)}

    if isinstance(value, Mapping):
        return Node(
            NodeKind.MAPPING,
            entries=tuple(
                (scalar_to_str(k), build_node(v, ancestors)) for k, v in value.items()
            ),
        )
    return Node(NodeKind.SEQUENCE, items=tuple(build_node(v, ancestors) for v in value))


# ---------------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------------

def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _render_sequence(node: Node) -> str:
    parts = []
    for item in node.items:
        if item.kind is not NodeKind.SCALAR:
            logger.debug("Skipping nested %s inside a sequence", item.kind.value)
            continue
        parts.append(item.text)
    return f"[{', '.join(parts)}]"


def _flatten_into(node: Node, prefix: str, out: dict[str, str]) -> None:
    if node.kind is NodeKind.MAPPING:
        for key, child in node.entries:
            if not key:
                logger.debug("Skipping entry with an empty key under %r", prefix)
                continue
            _flatten_into(child, _join(prefix, key), out)
    elif node.kind is NodeKind.SEQUENCE:
        out[prefix] = _render_sequence(node)
    else:
        out[prefix] = node.text


def flatten(node: Node) -> dict[str, str]:
    """Flatten *node* into an insertion-ordered ``dotted.path -> str`` dict.

    The root must be a mapping; callers reject anything else before calling.
    """
    if node.kind is not NodeKind.MAPPING:
        raise ValueError(f"cannot flatten a {node.kind.value} root")
    out: dict[str, str] = {}
    _flatten_into(node, "", out)
    return out


def flatten_value(value: Any) -> dict[str, str]:
    """Shorthand for ``flatten(build_node(value))``."""
    return flatten(build_node(value))
