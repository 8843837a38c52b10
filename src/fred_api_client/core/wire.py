"""JSON/XML wire documents."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from lxml import etree

from .errors import FredParseError, FredUnknownResponseFormatError

Record = Mapping[str, object]

# Collection name -> element name of its entries in XML.
ITEM_TAGS: dict[str, str] = {
    "categories": "category",
    "seriess": "series",
    "tags": "tag",
    "observations": "observation",
}


class ResponseFormat(Enum):
    JSON = "json"
    XML = "xml"

    @property
    def file_type(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class WireDocument:
    """Format-neutral view of a response body.

    ``meta`` holds the scalar members of the root; ``collections`` maps a
    collection name (``categories``, ``seriess``, ...) to its records.
    """

    meta: Mapping[str, object] = field(default_factory=dict)
    collections: Mapping[str, tuple[Record, ...]] = field(default_factory=dict)

    def collection(self, name: str) -> tuple[Record, ...]:
        return tuple(self.collections.get(name, ()))


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def _load_json(body: bytes) -> WireDocument:
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise FredParseError(f"failed to parse json response: {exc}") from exc
    if not isinstance(payload, dict):
        raise FredParseError("response JSON root must be an object")

    meta: dict[str, object] = {}
    collections: dict[str, tuple[Record, ...]] = {}
    for key, value in payload.items():
        if isinstance(value, list):
            for item in value:
                if not isinstance(item, dict):
                    raise FredParseError(f"{key} element must be an object")
            collections[key] = tuple(value)
        else:
            meta[key] = value
    return WireDocument(meta=meta, collections=collections)


def _load_xml(body: bytes) -> WireDocument:
    try:
        root = etree.fromstring(body, parser=_xml_parser())
    except etree.XMLSyntaxError as exc:
        raise FredParseError(f"failed to parse xml response: {exc}") from exc

    records = tuple(
        dict(child.attrib) for child in root if isinstance(child.tag, str)
    )
    return WireDocument(meta=dict(root.attrib), collections={root.tag: records})


def load_document(body: bytes, response_format: ResponseFormat) -> WireDocument:
    if response_format is ResponseFormat.JSON:
        return _load_json(body)
    if response_format is ResponseFormat.XML:
        return _load_xml(body)
    raise FredUnknownResponseFormatError(
        f"unknown request/response type: {response_format!r}"
    )


def _xml_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def dump_document(
    document: WireDocument,
    response_format: ResponseFormat,
    *,
    collection: str | None = None,
) -> bytes:
    """Marshal a document back to its wire form.

    XML holds one collection per document; ``collection`` picks it when the
    document carries more than one.
    """

    if response_format is ResponseFormat.JSON:
        payload: dict[str, object] = dict(document.meta)
        for name, records in document.collections.items():
            payload[name] = [dict(record) for record in records]
        return json.dumps(payload).encode("utf-8")

    if response_format is ResponseFormat.XML:
        names: Sequence[str] = list(document.collections)
        name = collection or (names[0] if names else "response")
        root = etree.Element(name, {k: _xml_value(v) for k, v in document.meta.items()})
        item_tag = ITEM_TAGS.get(name, "item")
        for record in document.collection(name):
            etree.SubElement(root, item_tag, {k: _xml_value(v) for k, v in record.items()})
        return etree.tostring(root, xml_declaration=True, encoding="utf-8")

    raise FredUnknownResponseFormatError(
        f"unknown request/response type: {response_format!r}"
    )


__all__ = [
    "Record",
    "ITEM_TAGS",
    "ResponseFormat",
    "WireDocument",
    "load_document",
    "dump_document",
]
