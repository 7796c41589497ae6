"""
Render Errors
=============

Failure kinds raised by the render pipeline. Every stage raises one of these
and the first failure propagates unchanged to the caller of ``render()``.
"""


class RenderError(Exception):
    """Base exception for render pipeline failures."""

    kind = "RenderError"


class ResourceReadError(RenderError):
    """Template or icon file missing or unreadable."""

    kind = "ResourceReadError"


class ElementNotFound(RenderError):
    """No slot element with the requested id exists in the document."""

    kind = "ElementNotFound"


class AttributeNotFound(RenderError):
    """A required attribute is absent from an element."""

    kind = "AttributeNotFound"


class IconContentMissing(RenderError):
    """Icon document has no extractable drawing content."""

    kind = "IconContentMissing"


class ParseError(RenderError):
    """Composed document is not valid SVG markup."""

    kind = "ParseError"


class AllocationError(RenderError):
    """Raster dimensions are invalid or the pixel surface could not be created."""

    kind = "AllocationError"


class EncodeError(RenderError):
    """Pixel buffer could not be serialized as a bitmap."""

    kind = "EncodeError"
