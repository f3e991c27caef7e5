"""
Structured SVG document model.

Renderers assemble an SvgDocument (style rules plus an element tree) and
serialize it once at the end. Keeping the shapes as data lets callers and
tests query the chart structurally instead of matching markup strings.
"""

import html
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from incubator_charts.charts.formatting import format_number

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
INDENT = "  "


def _attr_name(key: str) -> str:
    """Map a Python keyword to an SVG attribute (``class_`` -> ``class``)."""
    return key.rstrip("_").replace("_", "-")


def _attr_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return html.escape(str(value), quote=True)


@dataclass
class SvgElement:
    """One SVG node with attributes, optional text and child nodes."""

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    text: str | None = None
    children: list["SvgElement"] = field(default_factory=list)

    @property
    def css_class(self) -> str | None:
        return self.attrs.get("class")

    def add(self, tag: str, text: str | None = None, **attrs: Any) -> "SvgElement":
        """Append a child element; keyword names use ``_`` for ``-``."""
        child = SvgElement(tag, {_attr_name(k): v for k, v in attrs.items()}, text)
        self.children.append(child)
        return child

    def iter(self) -> Iterator["SvgElement"]:
        """Depth-first walk over this element and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()

    def to_markup(self, depth: int = 0) -> str:
        pad = INDENT * depth
        attrs = "".join(f' {k}="{_attr_value(v)}"' for k, v in self.attrs.items())
        if self.children:
            inner = "\n".join(child.to_markup(depth + 1) for child in self.children)
            return f"{pad}<{self.tag}{attrs}>\n{inner}\n{pad}</{self.tag}>"
        if self.text is not None:
            return f"{pad}<{self.tag}{attrs}>{html.escape(self.text, quote=False)}</{self.tag}>"
        return f"{pad}<{self.tag}{attrs}/>"


@dataclass
class SvgDocument:
    """A fixed-size standalone SVG document with inline style rules."""

    width: float
    height: float
    styles: dict[str, str] = field(default_factory=dict)
    root: SvgElement = field(default_factory=lambda: SvgElement("g"))

    @property
    def elements(self) -> list[SvgElement]:
        return self.root.children

    def add_style(self, selector: str, declarations: str) -> None:
        self.styles[selector] = declarations

    def add(self, tag: str, text: str | None = None, **attrs: Any) -> SvgElement:
        """Append a top-level element."""
        return self.root.add(tag, text, **attrs)

    def find_all(self, tag: str, css_class: str | None = None) -> list[SvgElement]:
        """All elements with ``tag`` (and ``css_class`` when given), in document order."""
        return [
            element
            for top in self.elements
            for element in top.iter()
            if element.tag == tag
            and (css_class is None or element.css_class == css_class)
        ]

    def texts(self) -> list[str]:
        """Text content of every text element, in document order."""
        return [element.text or "" for element in self.find_all("text")]

    def to_svg(self) -> str:
        """Serialize to a standalone SVG markup string."""
        width = format_number(self.width)
        height = format_number(self.height)
        lines = [
            f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
            f'xmlns="{SVG_NAMESPACE}">'
        ]
        if self.styles:
            lines.append(f"{INDENT}<defs>")
            lines.append(f"{INDENT * 2}<style>")
            for selector, declarations in self.styles.items():
                rule = html.escape(f"{selector} {{ {declarations} }}", quote=False)
                lines.append(f"{INDENT * 3}{rule}")
            lines.append(f"{INDENT * 2}</style>")
            lines.append(f"{INDENT}</defs>")
        lines.extend(element.to_markup(1) for element in self.elements)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"


# Shared style rules
TITLE_STYLE = "font: bold 16px sans-serif; fill: #1f2937; text-anchor: middle;"
AXIS_LABEL_STYLE = "font: 12px sans-serif; fill: #6b7280;"
AXIS_LINE_STYLE = "stroke: #d1d5db; stroke-width: 2;"


def new_chart_document(width: float, height: float, title: str) -> SvgDocument:
    """Document with the white background and centred title every chart shares."""
    document = SvgDocument(width, height)
    document.add_style(".chart-title", TITLE_STYLE)
    document.add("rect", width=width, height=height, fill="white", class_="background")
    document.add("text", title, x=width / 2, y=25, class_="chart-title")
    return document
