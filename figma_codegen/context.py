"""Generation context: all mutable state for one generated unit.

Exactly one GenerationContext is live per CodeGenerator. Nested units are
generated by snapshotting it, resetting it, and restoring the snapshot
afterwards (see CodeGenerator._isolated_context).
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from . import settings
from .models import (
    ComponentInfo,
    EventHandler,
    HandlerKind,
    InteractionKind,
    InteractiveElement,
    StateVariable,
)

_HANDLER_KIND_BY_INTERACTION = {
    InteractionKind.BUTTON: HandlerKind.CLICK,
    InteractionKind.INPUT: HandlerKind.CHANGE,
    InteractionKind.ACCORDION: HandlerKind.TOGGLE,
    InteractionKind.TOGGLE: HandlerKind.TOGGLE,
}


@dataclass
class GenerationContext:
    """Interactive elements, state, handlers and boundaries of one unit."""
    interactive_elements: Dict[str, InteractiveElement] = field(default_factory=dict)
    state_variables: List[StateVariable] = field(default_factory=list)
    event_handlers: List[EventHandler] = field(default_factory=list)
    components: Dict[str, ComponentInfo] = field(default_factory=dict)
    component_counter: int = 0
    use_aggregated_state: bool = False

    # -- population --------------------------------------------------

    def register_interactive(self, element: InteractiveElement) -> None:
        # A node matching several keyword sets keeps its last classification
        self.interactive_elements[element.node_id] = element

    def add_state_variable(self, variable: StateVariable) -> bool:
        """Append unless a variable with the same identifier exists."""
        if self.get_state_variable(variable.identifier) is not None:
            return False
        self.state_variables.append(variable)
        return True

    def add_event_handler(self, handler: EventHandler) -> bool:
        """Append unless a handler with the same identifier exists."""
        if any(h.identifier == handler.identifier for h in self.event_handlers):
            return False
        self.event_handlers.append(handler)
        return True

    def register_component(self, node_id: str, info: ComponentInfo) -> None:
        self.components[node_id] = info

    def next_anonymous_index(self) -> int:
        self.component_counter += 1
        return self.component_counter

    def update_state_aggregation(self) -> bool:
        self.use_aggregated_state = (
            len(self.state_variables) > settings.STATE_AGGREGATION_THRESHOLD
        )
        return self.use_aggregated_state

    # -- lookup --------------------------------------------------------

    def get_state_variable(self, identifier: str) -> Optional[StateVariable]:
        for variable in self.state_variables:
            if variable.identifier == identifier:
                return variable
        return None

    def find_interactive_by_identifier(self, identifier: str) -> Optional[InteractiveElement]:
        """First element (in registration order) carrying this identifier."""
        for element in self.interactive_elements.values():
            if element.identifier == identifier:
                return element
        return None

    # -- isolation -----------------------------------------------------

    def snapshot(self) -> "GenerationContext":
        """Independent copy of every collection, the counter and the flag.

        ComponentInfo.node is a reference into the design tree and is shared,
        not copied; the tree is never mutated after preprocessing.
        """
        return GenerationContext(
            interactive_elements=deepcopy(self.interactive_elements),
            state_variables=list(self.state_variables),
            event_handlers=list(self.event_handlers),
            components={
                node_id: ComponentInfo(info.name, info.node, info.parent_id)
                for node_id, info in self.components.items()
            },
            component_counter=self.component_counter,
            use_aggregated_state=self.use_aggregated_state,
        )

    def reset(self) -> None:
        self.interactive_elements = {}
        self.state_variables = []
        self.event_handlers = []
        self.components = {}
        self.component_counter = 0
        self.use_aggregated_state = False

    def restore(self, snapshot: "GenerationContext") -> None:
        self.interactive_elements = snapshot.interactive_elements
        self.state_variables = snapshot.state_variables
        self.event_handlers = snapshot.event_handlers
        self.components = snapshot.components
        self.component_counter = snapshot.component_counter
        self.use_aggregated_state = snapshot.use_aggregated_state


def resolve_handler_kind(handler: EventHandler, context: GenerationContext) -> HandlerKind:
    """Kind that decides a handler's name and body.

    The bound control's kind wins; without one a handler bound to a
    state variable toggles it, anything else is a click placeholder.
    """
    element = context.find_interactive_by_identifier(handler.identifier)
    if element is not None:
        return _HANDLER_KIND_BY_INTERACTION[element.kind]
    if context.get_state_variable(handler.identifier) is not None:
        return HandlerKind.TOGGLE
    return HandlerKind.CLICK
