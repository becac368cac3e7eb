"""Figma node builders shared by the test modules."""

from typing import Any, Dict, List, Optional


def bbox(x: float = 0, y: float = 0, width: float = 100, height: float = 40) -> Dict[str, float]:
    return {"x": x, "y": y, "width": width, "height": height}


def solid(r: float, g: float, b: float, a: float = 1.0, **extra: Any) -> Dict[str, Any]:
    paint = {"type": "SOLID", "color": {"r": r, "g": g, "b": b, "a": a}}
    paint.update(extra)
    return paint


def make_node(
    node_id: str,
    name: Optional[str],
    node_type: str = "FRAME",
    children: Optional[List[Dict[str, Any]]] = None,
    **attrs: Any,
) -> Dict[str, Any]:
    node: Dict[str, Any] = {"id": node_id, "type": node_type}
    if name is not None:
        node["name"] = name
    if children is not None:
        node["children"] = children
    node.update(attrs)
    return node


def make_frame(node_id: str, name: Optional[str], children=None, **attrs: Any) -> Dict[str, Any]:
    return make_node(node_id, name, "FRAME", children, **attrs)


def make_text(node_id: str, name: Optional[str], characters: str, **attrs: Any) -> Dict[str, Any]:
    return make_node(node_id, name, "TEXT", None, characters=characters, **attrs)
