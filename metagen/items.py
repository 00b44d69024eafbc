"""Data types shared by the extraction, processing and meta-tag modules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from pydantic import BaseModel

from metagen.settings import APPLE_TAGS, MS_TAGS, OG_TAGS, PRIMARY_TAGS, TWITTER_TAGS

# ---------------------------------------------------------------------------
# Flat metadata map
# ---------------------------------------------------------------------------

class Metadata(Mapping[str, str]):
    """Ordered, flat ``dotted.path -> str`` mapping produced by extraction.

    Read-only through the :class:`~collections.abc.Mapping` interface.
    :meth:`insert` exists for the pipeline stages that build a fresh copy;
    they never call it on the instance they were given.
    """

    __slots__ = ("_inner",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._inner: dict[str, str] = dict(data or {})

    def __getitem__(self, key: str) -> str:
        return self._inner[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __repr__(self) -> str:
        return f"Metadata({self._inner!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Metadata):
            return self._inner == other._inner
        if isinstance(other, Mapping):
            return self._inner == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def insert(self, key: str, value: str) -> str | None:
        """Set *key* to *value* and return the previous value, if any."""
        old = self._inner.get(key)
        self._inner[key] = value
        return old

    def copy(self) -> Metadata:
        return Metadata(self._inner)

    def to_dict(self) -> dict[str, str]:
        return dict(self._inner)


# ---------------------------------------------------------------------------
# Meta tags
# ---------------------------------------------------------------------------

def render_meta_tag(name: str, content: str) -> str:
    """Render one ``<meta>`` element.  Only double quotes in *content* are escaped."""
    escaped = content.replace('"', "&quot;")
    return f'<meta name="{name}" content="{escaped}">'


def generate_tags(metadata: Mapping[str, str], names: Iterable[str]) -> str:
    """Render every name in *names* present in *metadata*, newline-joined in *names* order."""
    return "\n".join(
        render_meta_tag(name, metadata[name]) for name in names if name in metadata
    )


class MetaTag(BaseModel):
    """A single ``<meta>`` element as a (name, content) pair."""

    name: str
    content: str


class MetaTagGroups(BaseModel):
    """Rendered meta elements grouped by platform."""

    apple: str = ""
    primary: str = ""
    og: str = ""
    ms: str = ""
    twitter: str = ""

    def __str__(self) -> str:
        return "\n".join((self.apple, self.primary, self.og, self.ms, self.twitter))

    def format_meta_tag(self, name: str, content: str) -> str:
        return render_meta_tag(name, content)

    def is_empty(self) -> bool:
        return not any((self.apple, self.primary, self.og, self.ms, self.twitter))

    # ------------------------------------------------------------------
    # Free-form classification
    # ------------------------------------------------------------------

    def add_custom_tag(self, name: str, content: str) -> None:
        """Append a rendered tag to the bucket selected by *name*'s prefix.

        ``msapplication`` is tested before ``og:`` / ``twitter:``; anything
        unrecognised goes to ``primary``.  No separator is inserted and
        repeated calls are not de-duplicated.
        """
        tag = render_meta_tag(name, content)
        if name.startswith("apple"):
            self.apple += tag
        elif name.startswith("msapplication"):
            self.ms += tag
        elif name.startswith("og:"):
            self.og += tag
        elif name.startswith("twitter:"):
            self.twitter += tag
        else:
            self.primary += tag

    # ------------------------------------------------------------------
    # Allow-list generation
    # ------------------------------------------------------------------

    def generate_apple_meta_tags(self, metadata: Mapping[str, str]) -> None:
        self.apple = generate_tags(metadata, APPLE_TAGS)

    def generate_primary_meta_tags(self, metadata: Mapping[str, str]) -> None:
        self.primary = generate_tags(metadata, PRIMARY_TAGS)

    def generate_og_meta_tags(self, metadata: Mapping[str, str]) -> None:
        self.og = generate_tags(metadata, OG_TAGS)

    def generate_ms_meta_tags(self, metadata: Mapping[str, str]) -> None:
        self.ms = generate_tags(metadata, MS_TAGS)

    def generate_twitter_meta_tags(self, metadata: Mapping[str, str]) -> None:
        self.twitter = generate_tags(metadata, TWITTER_TAGS)
