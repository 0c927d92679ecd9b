"""iconstyle: restyle single-path SVG icons onto decorative bases."""

__version__ = "0.1.0"
