"""Extraction sub-package: front matter, flattening and meta tags."""

from .flatten import Node, NodeKind, build_node, flatten
from .frontmatter import extract_metadata
from .metatags import extract_meta_tags, generate_metatags, meta_tags_to_dict

__all__ = [
    "Node",
    "NodeKind",
    "build_node",
    "extract_meta_tags",
    "extract_metadata",
    "flatten",
    "generate_metatags",
    "meta_tags_to_dict",
]
