"""Keyword tables for name-based classification.

Matching is a case-insensitive substring test against the Figma layer
name. Tables are plain data so callers can pass their own to the
analyzers.
"""

from typing import Dict, Tuple

from ..models import InteractionKind

# Layer names that suggest a reusable, separately generated component
COMPONENT_KEYWORDS: Tuple[str, ...] = (
    "card", "item", "list-item", "listitem", "row", "cell",
    "header", "footer", "sidebar", "nav", "menu", "button-group",
    "form-group", "input-group", "modal", "dialog", "popup",
    "accordion", "tab", "tab-item", "panel", "section",
    "widget", "block", "box", "container", "wrapper",
)

# Evaluated in this order; one node may match several kinds
INTERACTION_KEYWORDS: Dict[InteractionKind, Tuple[str, ...]] = {
    InteractionKind.BUTTON: (
        "button", "btn", "click", "submit", "confirm", "cancel", "ok", "apply",
    ),
    InteractionKind.INPUT: (
        "input", "textfield", "text-field", "form", "search", "textarea",
    ),
    InteractionKind.ACCORDION: (
        "accordion", "collapse", "collapsible", "expand", "折叠", "展开",
    ),
    InteractionKind.TOGGLE: (
        "toggle", "switch", "开关",
    ),
}
