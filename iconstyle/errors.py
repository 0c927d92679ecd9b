"""Error taxonomy for icon generation.

Every engine operation either returns a value or raises one of these.
"""

from __future__ import annotations


class IconEngineError(Exception):
    """Base class for all icon engine failures."""

    prefix = ""

    def __init__(self, description: str = "") -> None:
        self.description = description
        super().__init__(f"{self.prefix}{description}")


class SvgParsingError(IconEngineError):
    """Source markup is malformed or lacks the required viewBox / path."""

    prefix = "Failed to parse source SVG data: "


class InvalidInput(IconEngineError):
    """A configuration value (e.g. a gradient descriptor) is malformed."""

    prefix = "Invalid input provided: "


class UnknownError(IconEngineError):
    """Reserved catch-all. Nothing raises it yet."""

    def __init__(self, description: str = "An unknown error has occurred") -> None:
        super().__init__(description)
