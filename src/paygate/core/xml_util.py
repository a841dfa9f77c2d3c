"""
Conversion between nested dictionaries and the gateway's XML dialect.

Requests are plain dictionaries; responses come back as a "response tree":
a dictionary keyed by the underscored root element name whose values are
dicts, lists and type-coerced scalars.
"""

from __future__ import annotations

import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping

from lxml import etree

from .exceptions import UnexpectedError

__all__ = ["dict_from_xml", "xml_from_dict"]

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DATE_FORMAT = "%Y-%m-%d"

def _parser() -> etree.XMLParser:
    # Parsers carry state; never share one across calls.
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_blank_text=True,
        remove_comments=True,
    )


def _dasherize(key: str) -> str:
    return key.replace("_", "-")


def _underscore(tag: str) -> str:
    return tag.replace("-", "_")


def _build_node(parent: Any, key: str, value: Any) -> Any:
    tag = _dasherize(str(key))
    node = etree.Element(tag) if parent is None else etree.SubElement(parent, tag)

    # bool is checked before int because it is a subclass of it.
    if value is None:
        return node
    if isinstance(value, bool):
        node.set("type", "boolean")
        node.text = "true" if value else "false"
    elif isinstance(value, int):
        node.set("type", "integer")
        node.text = str(value)
    elif isinstance(value, (str, Decimal)):
        node.text = str(value)
    elif isinstance(value, datetime.datetime):
        node.set("type", "datetime")
        node.text = value.strftime(DATETIME_FORMAT)
    elif isinstance(value, datetime.date):
        node.set("type", "date")
        node.text = value.strftime(DATE_FORMAT)
    elif isinstance(value, Mapping):
        for child_key, child_value in value.items():
            _build_node(node, child_key, child_value)
    elif isinstance(value, (list, tuple)):
        node.set("type", "array")
        for item in value:
            _build_node(node, "item", item)
    else:
        raise TypeError(f"Unexpected XML node type: {type(value).__name__}")
    return node


def xml_from_dict(params: Mapping[str, Any]) -> str:
    """
    Serialize ``params`` into XML. Every top-level key becomes a root element;
    the gateway expects exactly one, e.g. ``{"transaction": {...}}``.
    """
    chunks = []
    for key, value in params.items():
        node = _build_node(None, key, value)
        chunks.append(etree.tostring(node, encoding="unicode"))
    return "".join(chunks)


_COERCIONS = {
    "integer": int,
    "decimal": Decimal,
    "datetime": lambda text: datetime.datetime.strptime(text, DATETIME_FORMAT),
    "date": lambda text: datetime.datetime.strptime(text, DATE_FORMAT).date(),
}


def _convert_scalar(node: Any) -> Any:
    text = (node.text or "").strip()
    node_type = node.get("type")

    if node.get("nil") == "true":
        return None
    if node_type == "boolean":
        return text in ("true", "1")
    if node_type not in _COERCIONS:
        return text
    if not text:
        return None
    try:
        return _COERCIONS[node_type](text)
    except (ValueError, InvalidOperation) as exc:
        raise UnexpectedError(f"Invalid {node_type} value in <{node.tag}>: {text!r}") from exc


def _parse_node(node: Any) -> Any:
    children = [child for child in node if isinstance(child.tag, str)]

    if node.get("type") == "array":
        return [_parse_node(child) for child in children]
    if not children:
        return _convert_scalar(node)
    return _build_dict(children)


def _build_dict(children: List[Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    repeated = set()
    for child in children:
        key = _underscore(child.tag)
        parsed = _parse_node(child)
        if key not in values:
            values[key] = parsed
        elif key in repeated:
            values[key].append(parsed)
        else:
            values[key] = [values[key], parsed]
            repeated.add(key)
    return values


def dict_from_xml(xml: str | bytes) -> Dict[str, Any]:
    """Parse a gateway response body into a response tree."""
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    try:
        root = etree.fromstring(xml.strip(), parser=_parser())
    except etree.XMLSyntaxError as exc:
        raise UnexpectedError(f"Unparseable XML response: {exc}") from exc
    return {_underscore(root.tag): _parse_node(root)}
