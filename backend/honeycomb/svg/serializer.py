"""Write SVG markup from element dictionaries."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr


def _attr_str(elem: dict[str, Any]) -> str:
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children", "text")}
    return " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())


def _element_lines(elem: dict[str, Any], indent: str) -> list[str]:
    tag = elem.get("tag", "path")
    attr_str = _attr_str(elem)
    opening = f"{tag} {attr_str}" if attr_str else tag
    children = elem.get("children") or []
    text = elem.get("text")

    if children:
        lines = [f"{indent}<{opening}>"]
        for child in children:
            lines.extend(_element_lines(child, indent + "  "))
        lines.append(f"{indent}</{tag}>")
        return lines
    if text is not None:
        return [f"{indent}<{opening}>{escape(str(text))}</{tag}>"]
    return [f"{indent}<{opening} />"]


def serialize_svg(
    elements: list[dict[str, Any]],
    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 800.0, 600.0),
    width: float | None = None,
    height: float | None = None,
    title: str = "",
    description: str = "",
    styles: dict[str, str] | None = None,
) -> str:
    """Generate SVG markup. Elements may nest via ``children`` or carry ``text``."""
    vx, vy, vw, vh = viewbox
    size = ""
    if width is not None and height is not None:
        size = f' width="{width:g}" height="{height:g}"'
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{vx:g} {vy:g} {vw:g} {vh:g}"{size} xmlns="http://www.w3.org/2000/svg"'
        f' role="img" preserveAspectRatio="xMidYMid meet">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    for elem in elements:
        lines.extend(_element_lines(elem, "  "))

    lines.append("</svg>")
    return "\n".join(lines)
