"""
Icon Splicer
============

Replace a slot rectangle in the dashboard template with an embedded icon.

The icon's own coordinate space is kept by wrapping its drawing content in a
nested <svg> whose viewBox is the icon's viewBox and whose width/height are
the slot's. The renderer then maps the icon onto the slot box without any of
the icon's paths being rewritten.
"""

import copy
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from lxml import etree

from weather_panel.config.logging import get_logger
from weather_panel.config.settings import Settings, get_settings
from weather_panel.core.composition.markup import (
    extract_attribute,
    locate_element,
    make_parser,
    local_name,
    namespaced_tag,
    parse_markup,
    read_resource,
    serialize_markup,
)
from weather_panel.core.errors import ElementNotFound, IconContentMissing
from weather_panel.models.schemas import IconSlot

logger = get_logger(__name__)


class IconSplicer:
    """Splices icon documents into slot elements of a parsed template."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.default_viewbox = self.settings.default_icon_viewbox
        self.preserve_aspect_ratio = self.settings.icon_preserve_aspect_ratio
        self.logger: Any = logger.bind(component="icon_splicer")  # structlog.BoundLoggerBase

    def splice(self, root: etree._Element, slot: IconSlot) -> etree._Element:
        """
        Replace the slot rect with an icon group, in place.

        Args:
            root: Parsed template document
            slot: Slot id and icon path

        Returns:
            The inserted <g> element

        Raises:
            ResourceReadError: If the icon file cannot be read
            ElementNotFound: If the slot rect is missing
            AttributeNotFound: If the slot lacks x, y, width or height
            IconContentMissing: If the icon has no drawing content
        """
        icon_text = read_resource(slot.icon_path, "icon")

        rect = locate_element(root, slot.slot_id)
        x = extract_attribute(rect, "x")
        y = extract_attribute(rect, "y")
        width = extract_attribute(rect, "width")
        height = extract_attribute(rect, "height")

        viewbox, content = self._load_icon(icon_text, slot.icon_path)

        namespace = etree.QName(rect).namespace
        group = self._build_group(slot.slot_id, x, y, width, height, viewbox, content, namespace)

        parent = rect.getparent()
        if parent is None:
            raise ElementNotFound(f"Slot '{slot.slot_id}' is the document root")
        group.tail = rect.tail
        parent.replace(rect, group)

        self.logger.debug(
            "Icon spliced",
            slot_id=slot.slot_id,
            icon_path=str(slot.icon_path),
            x=x,
            y=y,
            width=width,
            height=height,
            viewbox=viewbox,
        )
        return group

    def _load_icon(
        self, icon_text: str, icon_path: Path
    ) -> Tuple[str, List[etree._Element]]:
        """Return the icon's viewBox and the child nodes of its root <svg>."""
        try:
            icon_root = etree.fromstring(icon_text.encode("utf-8"), parser=make_parser())
        except etree.XMLSyntaxError as e:
            raise IconContentMissing(
                f"Could not extract icon content from '{icon_path}': {e}"
            ) from e

        if local_name(icon_root) != "svg":
            raise IconContentMissing(
                f"Could not extract icon content from '{icon_path}': root is not <svg>"
            )

        content = list(icon_root)
        if not any(isinstance(node.tag, str) for node in content):
            raise IconContentMissing(
                f"Could not extract icon content from '{icon_path}': empty <svg>"
            )

        viewbox = icon_root.get("viewBox") or self.default_viewbox
        return viewbox, content

    def _build_group(
        self,
        slot_id: str,
        x: str,
        y: str,
        width: str,
        height: str,
        viewbox: str,
        content: List[etree._Element],
        namespace: Optional[str],
    ) -> etree._Element:
        group = etree.Element(namespaced_tag("g", namespace))
        group.set("id", slot_id)
        group.set("transform", f"translate({x}, {y})")

        viewport = etree.SubElement(group, namespaced_tag("svg", namespace))
        viewport.set("width", width)
        viewport.set("height", height)
        viewport.set("viewBox", viewbox)
        if self.preserve_aspect_ratio:
            viewport.set("preserveAspectRatio", self.preserve_aspect_ratio)

        for node in content:
            viewport.append(_adopt_namespace(copy.deepcopy(node), namespace))

        return group


def _adopt_namespace(node: etree._Element, namespace: Optional[str]) -> etree._Element:
    """Move un-namespaced elements into the template's namespace."""
    if namespace:
        for element in node.iter():
            if isinstance(element.tag, str) and etree.QName(element).namespace is None:
                element.tag = namespaced_tag(element.tag, namespace)
    return node


def splice_icon(
    root: etree._Element,
    slot_id: str,
    icon_path: Union[str, Path],
    splicer: Optional[IconSplicer] = None,
) -> etree._Element:
    """Replace the slot rect ``slot_id`` in a parsed document with the icon at ``icon_path``."""
    splicer = splicer or IconSplicer()
    return splicer.splice(root, IconSlot(slot_id=slot_id, icon_path=Path(icon_path)))


def replace_slot_with_icon(
    document: str,
    slot_id: str,
    icon_path: Union[str, Path],
    splicer: Optional[IconSplicer] = None,
) -> str:
    """
    Text-level icon splice: parse the document, splice, serialize.

    Args:
        document: SVG markup composed so far
        slot_id: id of the slot rect to replace
        icon_path: Icon SVG path
        splicer: Splicer to use, defaults to one built from settings

    Returns:
        Updated document markup
    """
    root = parse_markup(document)
    splice_icon(root, slot_id, icon_path, splicer)
    return serialize_markup(root)
