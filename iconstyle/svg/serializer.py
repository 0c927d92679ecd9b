"""Write compact SVG markup from element definitions.

Values are interpolated as-is: nothing is escaped, so callers must not pass
untrusted colors, path data or identifiers.
"""

from __future__ import annotations

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def format_attrs(attrs: dict[str, str]) -> str:
    return " ".join(f'{k}="{v}"' for k, v in attrs.items())


def element(tag: str, attrs: dict[str, str] | None = None, children: str | None = None) -> str:
    """Render one element. ``children=None`` produces a self-closing tag."""
    attr_str = format_attrs(attrs or {})
    open_tag = f"<{tag} {attr_str}" if attr_str else f"<{tag}"
    if children is None:
        return f"{open_tag}/>"
    return f"{open_tag}>{children}</{tag}>"


def serialize_icon(
    width: int,
    height: int,
    definitions: str,
    base_shape: str,
    transform: str,
    path_data: str,
    icon_color: str,
) -> str:
    """Assemble the final single-line document: [defs] base shape, then the transformed path."""
    defs = element("defs", children=definitions) if definitions else ""
    path = element("path", {"d": path_data, "fill": icon_color})
    group = element("g", {"transform": transform}, children=path)
    root_attrs = {
        "width": str(width),
        "height": str(height),
        "viewBox": f"0 0 {width} {height}",
        "xmlns": SVG_NAMESPACE,
    }
    return element("svg", root_attrs, children=f"{defs}{base_shape}{group}")
