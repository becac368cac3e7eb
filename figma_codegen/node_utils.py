"""Figma node helpers shared by the transformers.

Tag mapping, text escaping, the "meaningful style" test, padding lookup,
child-position layout inference and semantic class-name derivation.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from . import settings
from .naming import to_kebab_case

_TAG_MAP = {
    "FRAME": "div",
    "GROUP": "div",
    "TEXT": "p",
    "RECTANGLE": "div",
    "ELLIPSE": "div",
    "VECTOR": "svg",
    "COMPONENT": "div",
    "INSTANCE": "div",
    "PAGE": "div",
}

SELF_CLOSING_TAGS = frozenset({"img", "input", "br", "hr", "meta", "link"})

STRUCTURAL_TYPES = frozenset({"FRAME", "GROUP"})

_LAYOUT_MODES = ("HORIZONTAL", "VERTICAL")
_POSITION_MODES = ("ABSOLUTE", "RELATIVE")

_GENERIC_NAME_RE = re.compile(r"^frame-\d+$")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")

_TEXT_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
    "{": "&#123;",
    "}": "&#125;",
}


def node_type(node: Dict) -> str:
    return (node.get("type") or "").upper()


def map_figma_type_to_tag(figma_type: str) -> str:
    return _TAG_MAP.get((figma_type or "").upper(), "div")


def is_self_closing(tag: str) -> bool:
    return tag in SELF_CLOSING_TAGS


def escape_text(text: str) -> str:
    """Escape text content for markup (HTML entities plus JSX braces)."""
    if not text:
        return ""
    return "".join(_TEXT_ESCAPES.get(ch, ch) for ch in text)


def get_padding(node: Dict) -> Tuple[float, float, float, float]:
    """(top, right, bottom, left); auto-layout and legacy keys both accepted."""
    return (
        node.get("paddingTop") or node.get("layoutPaddingTop") or 0,
        node.get("paddingRight") or node.get("layoutPaddingRight") or 0,
        node.get("paddingBottom") or node.get("layoutPaddingBottom") or 0,
        node.get("paddingLeft") or node.get("layoutPaddingLeft") or 0,
    )


def get_position_mode(node: Dict) -> Optional[str]:
    position = node.get("position")
    if position in _POSITION_MODES:
        return position
    if node.get("layoutPositioning") == "ABSOLUTE":
        return "ABSOLUTE"
    return None


def has_visual_style(node: Dict) -> bool:
    """Fills, strokes, radius, auto-layout, padding, opacity or positioning."""
    if not node:
        return False
    opacity = node.get("opacity")
    return bool(
        node.get("fills")
        or node.get("strokes")
        or (node.get("cornerRadius") or 0) > 0
        or node.get("layoutMode") in _LAYOUT_MODES
        or any(get_padding(node))
        or (opacity is not None and opacity < 1)
        or get_position_mode(node)
    )


def has_meaningful_style(node: Dict) -> bool:
    """Visual style, or explicit geometry (a defined width or height)."""
    if not node:
        return False
    if has_visual_style(node):
        return True
    bbox = node.get("absoluteBoundingBox") or {}
    return bbox.get("width") is not None or bbox.get("height") is not None


def detect_horizontal_layout(node: Dict) -> bool:
    """True if the first two children sit on one row (dy < tol, dx > tol)."""
    children = node.get("children") or []
    if len(children) < 2:
        return False
    first = children[0].get("absoluteBoundingBox")
    second = children[1].get("absoluteBoundingBox")
    if not first or not second:
        return False
    tolerance = settings.LAYOUT_INFERENCE_TOLERANCE
    dy = abs(second.get("y", 0) - first.get("y", 0))
    dx = abs(second.get("x", 0) - first.get("x", 0))
    return dy < tolerance and dx > tolerance


def infer_semantic_name(node: Dict) -> Optional[str]:
    """Guess a class name for generically named containers."""
    children: List[Dict[str, Any]] = node.get("children") or []
    if children:
        first = children[0]
        if node_type(first) == "TEXT" and first.get("characters"):
            text = first["characters"].lower()[:20]
            return to_kebab_case(text) or None

        if any("button" in (c.get("name") or "").lower() for c in children):
            return "button-group"
        if any("input" in (c.get("name") or "").lower() for c in children):
            return "input-group"

    layout_mode = node.get("layoutMode")
    if layout_mode == "HORIZONTAL":
        return "row"
    if layout_mode == "VERTICAL":
        return "column"
    return None


def derive_class_name(node: Dict) -> str:
    """Semantic kebab-case class name for a node; '' when it has no name."""
    if not node or not node.get("name"):
        return ""

    name = to_kebab_case(node["name"])

    # Figma auto-names carry no meaning
    if _GENERIC_NAME_RE.match(name) or name in ("group", "container"):
        name = infer_semantic_name(node) or "wrapper"

    if name and name[0].isdigit():
        name = "el-" + name

    if not name:
        node_id = node.get("id")
        name = f"node-{_NON_ALNUM_RE.sub('-', node_id)[:20]}" if node_id else "element"

    return name
