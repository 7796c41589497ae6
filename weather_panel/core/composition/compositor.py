"""
Template Compositor
===================

Builds the composed dashboard document from the static template: literal
placeholder substitution followed by icon splicing for every configured slot.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from weather_panel.config.logging import get_logger
from weather_panel.config.settings import Settings, get_settings
from weather_panel.core.composition.icons import IconSplicer
from weather_panel.core.composition.markup import parse_markup, read_resource, serialize_markup
from weather_panel.models.schemas import IconSlot

logger = get_logger(__name__)


def placeholder_token(field: str) -> str:
    """Return the template token for a field name, e.g. 'Den' -> '{{Den}}'."""
    return "{{" + field + "}}"


def substitute_placeholders(text: str, placeholders: Mapping[str, str]) -> str:
    """
    Replace every ``{{field}}`` token with its text.

    Replacement is literal and unescaped; a token absent from the text is a
    no-op.
    """
    for field, replacement in placeholders.items():
        text = text.replace(placeholder_token(field), replacement)
    return text


class TemplateCompositor:
    """Composes the dashboard SVG from the template, placeholders and icon slots."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        splicer: Optional[IconSplicer] = None,
    ):
        self.settings = settings or get_settings()
        self.splicer = splicer or IconSplicer(self.settings)
        self.logger: Any = logger.bind(component="compositor")  # structlog.BoundLoggerBase

    @property
    def slots(self) -> List[IconSlot]:
        """Configured icon slots in application order."""
        return [
            IconSlot(slot_id=slot_id, icon_path=Path(icon_path))
            for slot_id, icon_path in self.settings.icon_slots.items()
        ]

    def compose(
        self,
        template_path: Optional[Path] = None,
        placeholders: Optional[Dict[str, str]] = None,
        slots: Optional[List[IconSlot]] = None,
    ) -> str:
        """
        Produce the composed document.

        Args:
            template_path: Template to read, defaults to settings.template_path
            placeholders: Field to text mapping, defaults to settings.placeholders
            slots: Icon slots, defaults to settings.icon_slots

        Returns:
            Composed SVG markup

        Raises:
            ResourceReadError: If the template or an icon cannot be read
            ParseError: If the substituted template is not well-formed
            ElementNotFound, AttributeNotFound, IconContentMissing: From icon splicing
        """
        template_path = template_path or self.settings.template_path
        placeholders = self.settings.placeholders if placeholders is None else placeholders
        slots = self.slots if slots is None else slots

        template = read_resource(template_path, "template")
        document = substitute_placeholders(template, placeholders)

        if slots:
            # Slots are spliced in order on one tree; each splice only touches its own rect
            root = parse_markup(document)
            for slot in slots:
                self.splicer.splice(root, slot)
            document = serialize_markup(root)

        self.logger.info(
            "Template composed",
            template=str(template_path),
            placeholders=len(placeholders),
            slots=[slot.slot_id for slot in slots],
            document_length=len(document),
        )
        return document


def compose_template(settings: Optional[Settings] = None) -> str:
    """Compose the dashboard document using the configured template, placeholders and slots."""
    compositor = TemplateCompositor(settings)
    return compositor.compose()
