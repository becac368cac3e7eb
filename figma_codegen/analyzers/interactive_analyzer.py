"""Interactive element classification.

Visits every node (boundary interiors included) and registers buttons,
inputs, accordions and toggles on the generation context, together with
the state variables and event handlers the generated component needs:

| kind              | state               | handler |
|-------------------|---------------------|---------|
| button            | -                   | click   |
| input             | string, ""          | change  |
| accordion, toggle | boolean, false      | toggle  |
"""

import logging
from typing import Dict, Optional, Tuple

from ..context import GenerationContext
from ..models import (
    EventHandler,
    HandlerKind,
    InteractionKind,
    InteractiveElement,
    StateType,
    StateVariable,
)
from ..naming import sanitize_variable_name, to_camel_case
from .keywords import INTERACTION_KEYWORDS

logger = logging.getLogger(__name__)


class InteractiveElementAnalyzer:
    """Name-keyword classifier for interactive controls."""

    def __init__(self, keyword_sets: Optional[Dict[InteractionKind, Tuple[str, ...]]] = None):
        self.keyword_sets = keyword_sets if keyword_sets is not None else INTERACTION_KEYWORDS

    def classify(self, root: Optional[Dict], context: GenerationContext) -> None:
        """Populate interactive elements, state and handlers on the context."""
        self._visit(root, context)
        context.update_state_aggregation()
        logger.debug(
            f"classify: root={root.get('id') if root else None}, "
            f"elements={len(context.interactive_elements)}, "
            f"state={len(context.state_variables)}, "
            f"handlers={len(context.event_handlers)}, "
            f"aggregated={context.use_aggregated_state}"
        )

    def matches(self, name: str, kind: InteractionKind) -> bool:
        lowered = name.lower()
        return any(keyword in lowered for keyword in self.keyword_sets.get(kind, ()))

    def _visit(self, node: Optional[Dict], context: GenerationContext) -> None:
        if not node:
            return

        name = node.get("name") or ""
        for kind in self.keyword_sets:
            if self.matches(name, kind):
                self._register(node, kind, context)

        for child in node.get("children") or []:
            self._visit(child, context)

    def _register(self, node: Dict, kind: InteractionKind, context: GenerationContext) -> None:
        name = node.get("name") or ""
        identifier = sanitize_variable_name(to_camel_case(name or kind.value))
        context.register_interactive(InteractiveElement(
            node_id=node.get("id", ""),
            kind=kind,
            identifier=identifier,
            name=name,
        ))

        if kind == InteractionKind.BUTTON:
            context.add_event_handler(EventHandler(identifier, HandlerKind.CLICK))
        elif kind == InteractionKind.INPUT:
            context.add_state_variable(StateVariable(identifier, StateType.STRING, ""))
            context.add_event_handler(EventHandler(identifier, HandlerKind.CHANGE))
        else:
            context.add_state_variable(StateVariable(identifier, StateType.BOOLEAN, False))
            context.add_event_handler(EventHandler(identifier, HandlerKind.TOGGLE))
