#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XML canonicalization for human-editable save dumps.

The document is parsed with lxml, walked as a flat stream of events and
re-emitted with depth-proportional indentation. Only whitespace layout
changes: element order, attribute order and values, comments and processing
instructions are written back as they were read.

Layout rules:

- the XML declaration is always written first, as UTF-8
- markup starts on a new line unless it follows text in the same parent
- text stays on the line of its element, so ``<a>1</a>`` is kept as is
- a closing tag gets its own line only when the element ended with markup
- empty elements are written as ``<a></a>``, never self-closed
- comments are written verbatim, without added padding
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
import re
from typing import Any
from xml.sax.saxutils import escape, quoteattr

from lxml import etree

from gdsave.config.defaults import (
    XML_DEFAULT_VERSION,
    XML_INDENT,
    XML_LINE_SEPARATOR,
    XML_OUTPUT_ENCODING,
)
from gdsave.exceptions import MalformedXmlError

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# libxml2 reports standalone="no" for declarations without the attribute
_STANDALONE_DECLARED = re.compile(rb"\A(?:\xef\xbb\xbf)?\s*<\?xml\s[^>]*?\bstandalone\s*=")


class EventKind(Enum):
    """Kinds of events produced by :func:`iter_events`."""

    START = "start"
    END = "end"
    TEXT = "text"
    COMMENT = "comment"
    PI = "pi"
    ENTITY = "entity"
    DOCTYPE = "doctype"


class _Wrote(Enum):
    NOTHING = 0
    MARKUP = 1
    TEXT = 2


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        remove_blank_text=False,
        remove_comments=False,
        remove_pis=False,
        resolve_entities="internal",
        no_network=True,
        strip_cdata=True,
        huge_tree=True,
    )


def parse_document(data: bytes) -> etree._ElementTree:
    """Parse XML bytes into an lxml tree.

    Raises:
        MalformedXmlError: If data is not well-formed XML
    """
    if not data.strip():
        raise MalformedXmlError("Document is empty")

    try:
        return etree.fromstring(data, _make_parser()).getroottree()
    except etree.XMLSyntaxError as e:
        line = e.position[0] if e.position else None
        raise MalformedXmlError(f"Malformed XML: {e.msg}", line=line) from e
    except (ValueError, LookupError) as e:
        # Unknown or mismatched encoding declarations
        raise MalformedXmlError(f"Malformed XML: {e}") from e


def iter_events(tree: etree._ElementTree) -> Iterator[tuple[EventKind, Any]]:
    """Walk a parsed tree as a flat event stream.

    Whitespace-only text is dropped and remaining text is trimmed. The walk is
    iterative so deeply nested saves do not hit the recursion limit.
    """
    root = tree.getroot()

    for sibling in reversed(list(root.itersiblings(preceding=True))):
        yield _node_event(sibling)

    yield EventKind.START, root
    yield from _text_event(root.text)

    stack = [(root, iter(root))]
    while stack:
        parent, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            yield EventKind.END, parent
            if stack:
                yield from _text_event(parent.tail)
            continue

        if isinstance(child.tag, str):
            yield EventKind.START, child
            yield from _text_event(child.text)
            stack.append((child, iter(child)))
        else:
            yield _node_event(child)
            yield from _text_event(child.tail)

    for sibling in root.itersiblings():
        yield _node_event(sibling)


def _text_event(text: str | None) -> Iterator[tuple[EventKind, Any]]:
    if text is not None:
        trimmed = text.strip()
        if trimmed:
            yield EventKind.TEXT, trimmed


def _node_event(node: Any) -> tuple[EventKind, Any]:
    if node.tag is etree.Comment:
        return EventKind.COMMENT, node.text or ""
    if node.tag is etree.PI:
        return EventKind.PI, (node.target, node.text)
    if node.tag is etree.Entity:
        return EventKind.ENTITY, node.name
    raise MalformedXmlError(f"Unexpected node in document: {node!r}")


class XmlEventWriter:
    """Serializes an event stream with indentation."""

    def __init__(self, indent: str = XML_INDENT, newline: str = XML_LINE_SEPARATOR) -> None:
        self.indent = indent
        self.newline = newline
        self._parts: list[str] = []
        self._wrote: list[_Wrote] = [_Wrote.NOTHING]
        self._nsmaps: list[dict[str | None, str]] = [{}]

    @property
    def depth(self) -> int:
        return len(self._wrote) - 1

    def getvalue(self) -> str:
        return "".join(self._parts)

    def write_declaration(self, version: str, standalone: bool | None = None) -> None:
        decl = f'<?xml version="{version}" encoding="{XML_OUTPUT_ENCODING}"'
        if standalone is not None:
            decl += f' standalone="{"yes" if standalone else "no"}"'
        self._parts.append(decl + "?>")
        self._wrote[-1] = _Wrote.MARKUP

    def write(self, kind: EventKind, payload: Any) -> None:
        if kind is EventKind.START:
            self._start(payload)
        elif kind is EventKind.END:
            self._end(payload)
        elif kind is EventKind.TEXT:
            self._characters(escape(payload, {"\r": "&#13;"}))
        elif kind is EventKind.ENTITY:
            self._characters(f"&{payload};")
        elif kind is EventKind.COMMENT:
            self._markup(f"<!--{payload}-->")
        elif kind is EventKind.DOCTYPE:
            self._markup(payload)
        elif kind is EventKind.PI:
            target, text = payload
            self._markup(f"<?{target} {text}?>" if text else f"<?{target}?>")

    def _before_markup(self) -> None:
        if self._wrote[-1] is _Wrote.TEXT:
            return
        if self.depth > 0 or self._wrote[-1] is _Wrote.MARKUP:
            self._parts.append(self.newline + self.indent * self.depth)

    def _markup(self, text: str) -> None:
        self._before_markup()
        self._parts.append(text)
        self._wrote[-1] = _Wrote.MARKUP

    def _characters(self, text: str) -> None:
        self._parts.append(text)
        self._wrote[-1] = _Wrote.TEXT

    def _start(self, element: Any) -> None:
        parent_nsmap = self._nsmaps[-1]
        nsmap = dict(element.nsmap)
        declarations = [
            (prefix, uri) for prefix, uri in nsmap.items() if parent_nsmap.get(prefix) != uri
        ]

        parts = [_qualified_tag(element)]
        for prefix, uri in declarations:
            name = f"xmlns:{prefix}" if prefix else "xmlns"
            parts.append(f"{name}={quoteattr(uri)}")
        for key, value in element.attrib.items():
            parts.append(f"{_qualified_attr(key, nsmap)}={_quote(value)}")

        self._markup("<" + " ".join(parts) + ">")
        self._wrote.append(_Wrote.NOTHING)
        self._nsmaps.append(nsmap)

    def _end(self, element: Any) -> None:
        wrote = self._wrote.pop()
        self._nsmaps.pop()
        if wrote is _Wrote.MARKUP:
            self._parts.append(self.newline + self.indent * self.depth)
        self._parts.append(f"</{_qualified_tag(element)}>")
        self._wrote[-1] = _Wrote.MARKUP


def _qualified_tag(element: Any) -> str:
    local = etree.QName(element).localname
    return f"{element.prefix}:{local}" if element.prefix else local


def _qualified_attr(key: str, nsmap: dict[str | None, str]) -> str:
    qname = etree.QName(key)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    raise MalformedXmlError(f"No prefix bound for attribute namespace {qname.namespace}")


def _quote(value: str) -> str:
    # Keep attribute whitespace intact across a round trip
    return quoteattr(value, {"\n": "&#10;", "\r": "&#13;", "\t": "&#9;"})


def canonicalize(data: bytes) -> str:
    """Re-serialize an XML document with normalized indentation.

    Args:
        data: Raw XML document bytes

    Returns:
        The canonical document text

    Raises:
        MalformedXmlError: If data is not well-formed XML or references an
            external entity
    """
    tree = parse_document(data)
    docinfo = tree.docinfo

    writer = XmlEventWriter()
    writer.write_declaration(
        docinfo.xml_version or XML_DEFAULT_VERSION,
        standalone=docinfo.standalone if _STANDALONE_DECLARED.match(data) else None,
    )
    if docinfo.doctype:
        writer.write(EventKind.DOCTYPE, docinfo.doctype)
    for kind, payload in iter_events(tree):
        if kind is EventKind.ENTITY:
            # The internal subset is not written back, so the reference would dangle
            raise MalformedXmlError(f"Unresolved entity reference &{payload}; cannot be preserved")
        writer.write(kind, payload)
    return writer.getvalue()


# 🎮💾🔚
