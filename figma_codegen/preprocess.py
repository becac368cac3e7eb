"""Design tree normalization: the first pass of every generation.

Produces a new tree; the input document is never modified, so one fetched
document can be generated repeatedly under different configurations.

- relativeBoundingBox: absolute bounds minus the parent's origin
- fills / strokes: entries with visible == False removed
"""

from copy import deepcopy
from typing import Any, Dict, Optional


def _visible_paints(paints: Any) -> Any:
    if not isinstance(paints, list):
        return deepcopy(paints)
    return [deepcopy(p) for p in paints if not (isinstance(p, dict) and p.get("visible") is False)]


def normalize(node: Optional[Dict], parent: Optional[Dict] = None) -> Optional[Dict[str, Any]]:
    """Return a normalized copy of `node` (None for an empty node).

    Args:
        node: Raw Figma node dict
        parent: The node's raw parent, used for parent-relative geometry
    """
    if not node:
        return None

    normalized: Dict[str, Any] = {}
    for key, value in node.items():
        if key == "children":
            continue
        if key in ("fills", "strokes"):
            normalized[key] = _visible_paints(value)
        else:
            normalized[key] = deepcopy(value)

    bbox = node.get("absoluteBoundingBox")
    parent_bbox = parent.get("absoluteBoundingBox") if parent else None
    if bbox and parent_bbox:
        normalized["relativeBoundingBox"] = {
            "x": bbox.get("x", 0) - parent_bbox.get("x", 0),
            "y": bbox.get("y", 0) - parent_bbox.get("y", 0),
            "width": bbox.get("width"),
            "height": bbox.get("height"),
        }

    children = node.get("children")
    if isinstance(children, list):
        normalized_children = []
        for child in children:
            child_norm = normalize(child, node)
            if child_norm is not None:
                normalized_children.append(child_norm)
        normalized["children"] = normalized_children

    return normalized
