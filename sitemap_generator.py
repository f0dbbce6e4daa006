"""Module for generating XML sitemaps, sitemap indexes and text URL lists.

This module converts sequences of sitemap records into:
- XML sitemap format (sitemaps.org protocol 0.9, <urlset>)
- XML sitemap index format (<sitemapindex>)
- Plain text format (one URL per line)

Both XML documents are produced by one serializer parameterized by a
DocumentKind descriptor. Output is compact: no whitespace between tags.
"""

import html
import logging
import math
import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Iterable, Iterator, List, Sequence, Union

from sitemap_entries import SitemapIndexEntry, UrlEntry
from sitemap_errors import SitemapFileOpenError, SitemapWriteError

# Configuration Constants
XML_DECLARATION: str = '<?xml version="1.0" encoding="UTF-8"?>'
SITEMAP_NAMESPACE: str = 'http://www.sitemaps.org/schemas/sitemap/0.9'
MAX_ENTRIES_PER_DOCUMENT: int = 50000  # Protocol limit per sitemap file
DEFAULT_ENCODING: str = 'utf-8'

logger = logging.getLogger(__name__)

PathType = Union[str, os.PathLike]


def escape_text(text: str) -> str:
    """Escape text for use as XML element or attribute content.

    Converts &, <, >, " and ' to entity references. Input that already
    contains entity references is escaped again, so html.unescape() always
    recovers the original text.

    Args:
        text: Arbitrary text.

    Returns:
        Escaped text.
    """
    return html.escape(text, quote=True)


def format_priority(priority: float) -> str:
    """Render a priority in its shortest positional form.

    '1' for 1.0, '0.8' for 0.8 and '0.00001' for 1e-05; the sign of -0.0 is
    kept. Never uses an exponent, so the result is a valid xsd:decimal for
    finite values.
    """
    value = float(priority)
    if value == 0 and math.copysign(1.0, value) < 0:
        return '-0'
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if 'e' in text:
        text = format(Decimal(text), 'f')
    return text


def _element(tag: str, text: str) -> str:
    return f"<{tag}>{text}</{tag}>"


def render_url_fields(entry: UrlEntry) -> str:
    """Render the child elements of a <url> in protocol order."""
    parts = [_element('loc', escape_text(entry.location))]
    if entry.last_modified is not None:
        parts.append(_element('lastmod', escape_text(entry.last_modified)))
    if entry.change_frequency is not None:
        parts.append(_element('changefreq', entry.change_frequency.value))
    if entry.priority is not None:
        parts.append(_element('priority', format_priority(entry.priority)))
    return ''.join(parts)


def render_index_fields(entry: SitemapIndexEntry) -> str:
    """Render the child elements of a <sitemap> in protocol order."""
    parts = [_element('loc', escape_text(entry.location))]
    if entry.last_modified is not None:
        parts.append(_element('lastmod', escape_text(entry.last_modified)))
    return ''.join(parts)


@dataclass(frozen=True)
class DocumentKind:
    """Describes one kind of sitemap document.

    Attributes:
        root_tag: Name of the root element.
        child_tag: Name of the element wrapping each entry.
        render_fields: Renders the content of one child element.
        closing_suffix: Text emitted after the closing root tag.
    """

    root_tag: str
    child_tag: str
    render_fields: Callable[[Any], str]
    closing_suffix: str = ''

    @property
    def root_open(self) -> str:
        return f'<{self.root_tag} xmlns="{SITEMAP_NAMESPACE}">'

    @property
    def root_close(self) -> str:
        return f"</{self.root_tag}>{self.closing_suffix}"

    def render_entry(self, entry: Any) -> str:
        return _element(self.child_tag, self.render_fields(entry))


# The trailing space after </urlset> is kept for byte compatibility with
# previously generated files. The index has none.
URLSET = DocumentKind('urlset', 'url', render_url_fields, closing_suffix=' ')
SITEMAP_INDEX = DocumentKind('sitemapindex', 'sitemap', render_index_fields)


class EntryListSerializer:
    """Serializes a list of entries into one sitemap document.

    Subclasses set `kind` to choose the document shape. `build` and `make`
    emit the same chunks, so string and file output are identical.
    """

    kind: DocumentKind

    @classmethod
    def iter_chunks(cls, entries: Sequence[Any]) -> Iterator[str]:
        """Yield the declaration, root-open tag, each entry and root-close tag."""
        yield XML_DECLARATION
        yield cls.kind.root_open
        for entry in entries:
            yield cls.kind.render_entry(entry)
        yield cls.kind.root_close

    @classmethod
    def build(cls, entries: Iterable[Any]) -> str:
        """Build the complete document as a string.

        Useful when serving the sitemap dynamically from a web server.

        Args:
            entries: Records to include, in output order.

        Returns:
            The XML document.
        """
        return ''.join(cls.iter_chunks(list(entries)))

    @classmethod
    def make(cls, path: PathType, entries: Iterable[Any]) -> None:
        """Write the document to a file, creating or truncating it.

        Each part of the document is written separately and the file is
        flushed before returning. Logs a warning when the entries exceed
        the protocol limit of MAX_ENTRIES_PER_DOCUMENT; the file is still
        written. On failure the file may be left partially written.

        Args:
            path: Destination file path.
            entries: Records to include, in output order.

        Raises:
            SitemapFileOpenError: If the file cannot be created.
            SitemapWriteError: If a write or the final flush fails.
        """
        entries = list(entries)
        if len(entries) > MAX_ENTRIES_PER_DOCUMENT:
            logger.warning(
                f"{cls.kind.root_tag} for {path} has {len(entries)} entries, "
                f"protocol limit is {MAX_ENTRIES_PER_DOCUMENT}"
            )
        try:
            handle = open(path, 'w', encoding=DEFAULT_ENCODING, newline='')
        except OSError as e:
            logger.error(f"Failed to open {path}: {e}")
            raise SitemapFileOpenError(str(e)) from e

        try:
            with handle:
                for chunk in cls.iter_chunks(entries):
                    handle.write(chunk)
                handle.flush()
        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Failed to write {path}: {e}")
            raise SitemapWriteError(str(e)) from e

        logger.info(f"Wrote {cls.kind.root_tag} with {len(entries)} entries to {path}")


class SitemapWriter(EntryListSerializer):
    """Writer for <urlset> sitemaps built from UrlEntry records."""

    kind = URLSET


class SitemapIndexWriter(EntryListSerializer):
    """Writer for <sitemapindex> documents built from SitemapIndexEntry records.

    Use an index when a site has more than 50,000 URLs or when sitemaps are
    split by category.
    """

    kind = SITEMAP_INDEX


def build_sitemap(urls: Iterable[UrlEntry]) -> str:
    return SitemapWriter.build(urls)


def make_sitemap(path: PathType, urls: Iterable[UrlEntry]) -> None:
    SitemapWriter.make(path, urls)


def build_sitemap_index(sitemaps: Iterable[SitemapIndexEntry]) -> str:
    return SitemapIndexWriter.build(sitemaps)


def make_sitemap_index(path: PathType, sitemaps: Iterable[SitemapIndexEntry]) -> None:
    SitemapIndexWriter.make(path, sitemaps)


def build_text(entries: Iterable[Union[UrlEntry, SitemapIndexEntry]]) -> str:
    """Convert entries to the plain text sitemap format.

    Each location is placed on a separate line, in input order. The text
    format has no markup, so locations are not escaped.

    Args:
        entries: UrlEntry or SitemapIndexEntry records.

    Returns:
        String with one URL per line.
    """
    locations: List[str] = [entry.location for entry in entries]
    return '\n'.join(locations)
