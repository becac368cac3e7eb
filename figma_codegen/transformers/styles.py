"""Design tree -> deduplicated stylesheet.

Each named node with text or geometry contributes one rule, keyed by its
derived class name (first occurrence wins). Rules are built only from the
values collected by extract_style_inputs(); the sorted tuple of those
values is the node's style key, so classes sharing a key share an
identical body and are emitted as one combined selector.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..node_utils import derive_class_name, detect_horizontal_layout, get_padding, get_position_mode, node_type
from ..style_utils import (
    BASE_STYLES,
    format_number,
    get_gap_var,
    get_radius_var,
    get_spacing_var,
    is_transparent,
    px,
    rgba_to_css,
)

logger = logging.getLogger(__name__)

StyleKey = Tuple[Tuple[str, Any], ...]

_LAYOUT_DIRECTIONS = {"HORIZONTAL": "row", "VERTICAL": "column"}

_TEXT_ALIGN = {
    "LEFT": "left",
    "CENTER": "center",
    "RIGHT": "right",
    "JUSTIFIED": "justify",
}

_TEXT_DECORATION = {
    "UNDERLINE": "underline",
    "STRIKETHROUGH": "line-through",
}

_JUSTIFY = {
    "CENTER": "center",
    "MAX": "flex-end",
    "SPACE_BETWEEN": "space-between",
    "SPACE_AROUND": "space-around",
}

_ALIGN_ITEMS = {
    "CENTER": "center",
    "MAX": "flex-end",
    "STRETCH": "stretch",
    "BASELINE": "baseline",
}

_SELF_ALIGN = {
    "MIN": "flex-start",
    "CENTER": "center",
    "MAX": "flex-end",
    "STRETCH": "stretch",
}


def _first_solid(paints: Any) -> Optional[Dict]:
    for paint in paints or []:
        if isinstance(paint, dict) and paint.get("type") == "SOLID" and paint.get("visible") is not False:
            return paint
    return None


def _paint_color(paint: Optional[Dict]) -> Optional[str]:
    if paint is None:
        return None
    return rgba_to_css(paint.get("color"), paint.get("opacity"))


def _inferred_direction(node: Dict) -> Optional[str]:
    children = node.get("children") or []
    if node.get("layoutMode") in _LAYOUT_DIRECTIONS or len(children) <= 1:
        return None
    if detect_horizontal_layout(node):
        return "row"
    if len(children) > 2:
        return "column"
    return None


def extract_style_inputs(node: Dict) -> Dict[str, Any]:
    """Every node attribute the rule body depends on, as hashable scalars."""
    style = node.get("style") or {}
    bbox = node.get("absoluteBoundingBox") or {}
    constraints = node.get("constraints") or {}
    is_text = node_type(node) == "TEXT"
    stroke = _first_solid(node.get("strokes"))

    return {
        "text": is_text,
        "width": bbox.get("width") or None,
        "height": bbox.get("height") or None,
        "constraint_h": constraints.get("horizontal"),
        "constraint_v": constraints.get("vertical"),
        "has_strokes": bool(node.get("strokes")),
        "background": None if is_text else _paint_color(_first_solid(node.get("fills"))),
        "text_color": _paint_color(_first_solid(node.get("fills"))) if is_text else None,
        "border": _paint_color(stroke),
        "border_weight": (node.get("strokeWeight") or 1) if stroke else None,
        "radius": node.get("cornerRadius") or None,
        "padding": get_padding(node),
        "font_family": style.get("fontFamily"),
        "font_size": style.get("fontSize"),
        "font_weight": style.get("fontWeight"),
        "letter_spacing": style.get("letterSpacing") or None,
        "line_height_px": style.get("lineHeightPx"),
        "line_height_pct": style.get("lineHeightPercentFontSize"),
        "text_align": style.get("textAlignHorizontal") or node.get("textAlignHorizontal"),
        "text_decoration": style.get("textDecoration") or node.get("textDecoration"),
        "layout_mode": node.get("layoutMode"),
        "primary_align": node.get("primaryAxisAlignItems"),
        "counter_align": node.get("counterAxisAlignItems"),
        "item_spacing": node.get("itemSpacing"),
        "layout_wrap": node.get("layoutWrap"),
        "inferred_direction": _inferred_direction(node),
        "position": get_position_mode(node),
        "clips_content": bool(node.get("clipsContent")),
        "opacity": node.get("opacity"),
        "hidden": node.get("visible") is False,
        "min_width": node.get("minWidth"),
        "max_width": node.get("maxWidth"),
        "min_height": node.get("minHeight"),
        "max_height": node.get("maxHeight"),
    }


def style_key(inputs: Dict[str, Any]) -> StyleKey:
    return tuple(sorted(inputs.items()))


def _size_rules(inputs: Dict[str, Any]) -> List[str]:
    rules = []
    fixed = (
        "FIXED" in (inputs["constraint_h"], inputs["constraint_v"])
        or inputs["min_width"]
        or inputs["min_height"]
    )
    for prop, axis, value in (
        ("width", "constraint_h", inputs["width"]),
        ("height", "constraint_v", inputs["height"]),
    ):
        if not value:
            continue
        if fixed or inputs["text"]:
            rules.append(f"{prop}: {px(value)}")
        elif inputs[axis] == "STRETCH":
            rules.append(f"{prop}: 100%")
    return rules


def _font_rules(inputs: Dict[str, Any]) -> List[str]:
    rules = []
    family = inputs["font_family"]
    if family:
        family = f'"{family}"' if " " in family else family
        rules.append(f"font-family: {family}, sans-serif")
    if inputs["font_size"]:
        rules.append(f"font-size: {px(inputs['font_size'])}")
    if inputs["font_weight"]:
        rules.append(f"font-weight: {format_number(inputs['font_weight'])}")
    if inputs["letter_spacing"]:
        rules.append(f"letter-spacing: {px(inputs['letter_spacing'])}")
    if inputs["line_height_px"]:
        rules.append(f"line-height: {px(inputs['line_height_px'])}")
    elif inputs["line_height_pct"]:
        line_height = inputs["line_height_pct"] / 100 * (inputs["font_size"] or 16)
        rules.append(f"line-height: {px(line_height)}")
    return rules


def _flex_rules(inputs: Dict[str, Any]) -> List[str]:
    mode = inputs["layout_mode"]
    if mode in _LAYOUT_DIRECTIONS:
        rules = ["display: flex", f"flex-direction: {_LAYOUT_DIRECTIONS[mode]}"]
        justify = _JUSTIFY.get(inputs["primary_align"])
        if justify:
            rules.append(f"justify-content: {justify}")
        align = _ALIGN_ITEMS.get(inputs["counter_align"])
        if align:
            rules.append(f"align-items: {align}")
        if (inputs["item_spacing"] or 0) > 0:
            rules.append(f"gap: {get_gap_var(inputs['item_spacing'])}")
        if inputs["layout_wrap"] == "WRAP":
            rules.append("flex-wrap: wrap")
        return rules
    if inputs["inferred_direction"]:
        return ["display: flex", f"flex-direction: {inputs['inferred_direction']}"]
    return []


def _constraint_rules(inputs: Dict[str, Any]) -> List[str]:
    rules = []
    for axis, prop in (("constraint_h", "width"), ("constraint_v", "height")):
        mode = inputs[axis]
        if mode in _SELF_ALIGN:
            rules.append(f"align-self: {_SELF_ALIGN[mode]}")
        if mode in ("STRETCH", "SCALE") and inputs[prop]:
            rules.append(f"{prop}: 100%")
    return rules


def build_rule_body(inputs: Dict[str, Any]) -> List[str]:
    """Ordered declarations ('prop: value') for one set of style inputs."""
    rules: List[str] = []
    padding = inputs["padding"]

    if inputs["has_strokes"] or any(padding):
        rules.append("box-sizing: border-box")

    rules.extend(_size_rules(inputs))

    background = inputs["background"]
    if background and not is_transparent(background):
        rules.append(f"background-color: {background}")

    if inputs["border"]:
        rules.append(f"border: {px(inputs['border_weight'])} solid {inputs['border']}")

    if inputs["radius"] and inputs["radius"] > 0:
        rules.append(f"border-radius: {get_radius_var(inputs['radius'])}")

    if any(padding):
        if len(set(padding)) == 1:
            rules.append(f"padding: {get_spacing_var(padding[0])}")
        else:
            rules.append("padding: " + " ".join(get_spacing_var(p) for p in padding))

    rules.extend(_font_rules(inputs))

    text_color = inputs["text_color"]
    if text_color and not is_transparent(text_color):
        rules.append(f"color: {text_color}")

    if inputs["text_align"] in _TEXT_ALIGN:
        rules.append(f"text-align: {_TEXT_ALIGN[inputs['text_align']]}")

    if inputs["text_decoration"] in _TEXT_DECORATION:
        rules.append(f"text-decoration: {_TEXT_DECORATION[inputs['text_decoration']]}")

    rules.extend(_flex_rules(inputs))

    if inputs["position"]:
        rules.append(f"position: {inputs['position'].lower()}")

    rules.extend(_constraint_rules(inputs))

    if inputs["clips_content"]:
        rules.append("overflow: hidden")

    opacity = inputs["opacity"]
    if opacity is not None and opacity < 1:
        rules.append(f"opacity: {format_number(opacity)}")

    if inputs["hidden"]:
        rules.append("display: none")

    for prop in ("min_width", "max_width", "min_height", "max_height"):
        if inputs[prop]:
            rules.append(f"{prop.replace('_', '-')}: {px(inputs[prop])}")

    if inputs["text"]:
        rules.append("white-space: pre-wrap")
        rules.append("word-wrap: break-word")

    # STRETCH/SCALE may repeat a size declaration
    deduped: List[str] = []
    for rule in rules:
        if rule not in deduped:
            deduped.append(rule)
    return deduped


def format_rule(selectors: List[str], body: List[str]) -> str:
    lines = "\n".join(f"  {declaration};" for declaration in body)
    return f"{', '.join(selectors)} {{\n{lines}\n}}"


class StyleTransformer:
    """Collects one rule per class name and merges identical bodies."""

    def __init__(self, include_base: bool = True):
        self.include_base = include_base

    def emit(self, root: Optional[Dict], root_label: str = "") -> str:
        visited: set = set()
        groups: Dict[StyleKey, Dict[str, Any]] = {}
        self._collect(root, visited, groups)

        blocks = [BASE_STYLES] if self.include_base else []
        for group in groups.values():
            blocks.append(format_rule([f".{c}" for c in group["classes"]], group["body"]))

        merged = sum(1 for g in groups.values() if len(g["classes"]) > 1)
        logger.debug(
            f"emit: {root_label or 'unit'} classes={len(visited)}, "
            f"rules={len(groups)}, merged={merged}"
        )
        return "\n\n".join(blocks)

    def _collect(
        self,
        node: Optional[Dict],
        visited: set,
        groups: Dict[StyleKey, Dict[str, Any]],
    ) -> None:
        if not node:
            return

        class_name = derive_class_name(node)
        if class_name and class_name not in visited:
            visited.add(class_name)
            if node_type(node) == "TEXT" or node.get("absoluteBoundingBox"):
                inputs = extract_style_inputs(node)
                body = build_rule_body(inputs)
                if body:
                    key = style_key(inputs)
                    group = groups.setdefault(key, {"classes": [], "body": body})
                    group["classes"].append(class_name)

        for child in node.get("children") or []:
            self._collect(child, visited, groups)
