"""
SVG Markup Helpers
==================

Parsing, lookup and serialization of SVG markup with lxml.
Provides the attribute extractor and element locator used when splicing
icons into the dashboard template.
"""

from pathlib import Path
from typing import Union

from lxml import etree

from weather_panel.config.logging import get_logger
from weather_panel.core.errors import (
    AttributeNotFound,
    ElementNotFound,
    ParseError,
    ResourceReadError,
)

logger = get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
PIXEL_SUFFIX = "px"


def make_parser() -> etree.XMLParser:
    """Create an XML parser that never loads external entities or network resources."""
    # Parsers are never shared between threads
    return etree.XMLParser(resolve_entities=False, no_network=True)


def read_resource(path: Union[str, Path], description: str = "resource") -> str:
    """
    Read a UTF-8 text resource from disk.

    Args:
        path: File path, relative paths resolve against the working directory
        description: Human readable resource name used in the error message

    Returns:
        File contents

    Raises:
        ResourceReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceReadError(f"Failed to read {description} '{path}': {e}") from e


def parse_markup(text: str) -> etree._Element:
    """
    Parse SVG markup text into an element tree.

    Raises:
        ParseError: If the markup is not well-formed XML
    """
    try:
        return etree.fromstring(text.encode("utf-8"), parser=make_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Malformed SVG markup: {e}") from e


def serialize_markup(root: etree._Element) -> str:
    """Serialize an element tree back to markup text."""
    return etree.tostring(root, encoding="unicode")


def local_name(element: etree._Element) -> str:
    """Return the tag name without namespace, or '' for comments and processing instructions."""
    if not isinstance(element.tag, str):
        return ""
    return etree.QName(element).localname


def namespaced_tag(name: str, namespace: Union[str, None]) -> str:
    return f"{{{namespace}}}{name}" if namespace else name


def extract_attribute(element: Union[str, etree._Element], name: str) -> str:
    """
    Get an attribute value from an element, without a trailing 'px' unit.

    The lookup is by exact attribute name, so 'width' never matches
    'stroke-width'. The value is returned as text; no numeric validation is
    done.

    Args:
        element: Parsed element or a raw markup fragment such as '<rect .../>'
        name: Attribute name

    Returns:
        Attribute value with one trailing 'px' removed

    Raises:
        AttributeNotFound: If the attribute is absent or the fragment cannot be parsed
    """
    if isinstance(element, str):
        try:
            element = etree.fromstring(element.encode("utf-8"), parser=make_parser())
        except etree.XMLSyntaxError as e:
            raise AttributeNotFound(
                f"Attribute '{name}' not found: unparseable fragment ({e})"
            ) from e

    value = element.get(name)
    if value is None:
        raise AttributeNotFound(f"Attribute '{name}' not found")

    value = value.strip()
    if value.endswith(PIXEL_SUFFIX):
        value = value[: -len(PIXEL_SUFFIX)]
    return value


def _has_no_content(element: etree._Element) -> bool:
    return len(element) == 0 and not (element.text or "").strip()


def locate_element(root: etree._Element, element_id: str) -> etree._Element:
    """
    Find the empty ``rect`` element carrying the given id.

    Both ``<rect .../>`` and ``<rect ...></rect>`` forms match, wherever the
    id sits in the attribute list. When the id is not unique the first match
    in document order wins.

    Args:
        root: Document root
        element_id: Value of the element's id attribute

    Returns:
        Matched element

    Raises:
        ElementNotFound: If no such rect exists
    """
    matches = [
        element
        for element in root.iter(namespaced_tag("rect", SVG_NAMESPACE), "rect")
        if element.get("id") == element_id and _has_no_content(element)
    ]

    if not matches:
        raise ElementNotFound(f"Rectangle with id '{element_id}' not found")

    if len(matches) > 1:
        logger.warning(
            "Element id is not unique, using first match",
            element_id=element_id,
            matches=len(matches),
        )

    return matches[0]


def locate_element_markup(document: str, element_id: str) -> str:
    """Return the serialized text of the slot rect with the given id."""
    element = locate_element(parse_markup(document), element_id)
    return etree.tostring(element, encoding="unicode", with_tail=False)
