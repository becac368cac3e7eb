"""Component boundary detection.

Walks a design tree depth-first (pre-order) and decides which subtrees
become separately generated units. Rules, first match wins:

1. COMPONENT / INSTANCE nodes
2. Layer name contains a component keyword (card, header, modal, ...)
3. Repeated structure: >= 3 children, shallow depth, and the first two
   children share a type with child counts differing by at most 1

A matched node is recorded and its interior is left for its own
generation pass. The unit's own root is the exception: it is recorded
(so markup can recognise a self-reference) but its children are still
searched.
"""

import logging
from typing import Dict, Iterable, Optional

from .. import settings
from ..context import GenerationContext
from ..models import ComponentInfo
from ..naming import to_pascal_case
from ..node_utils import node_type
from .keywords import COMPONENT_KEYWORDS

logger = logging.getLogger(__name__)

_COMPONENT_TYPES = frozenset({"COMPONENT", "INSTANCE"})


class ComponentAnalyzer:
    """Partitions a design tree into component boundaries."""

    def __init__(
        self,
        keywords: Iterable[str] = COMPONENT_KEYWORDS,
        min_children: Optional[int] = None,
        max_depth: Optional[int] = None,
    ):
        self.keywords = tuple(k.lower() for k in keywords)
        self.min_children = (
            settings.REPEATED_STRUCTURE_MIN_CHILDREN if min_children is None else min_children
        )
        self.max_depth = (
            settings.REPEATED_STRUCTURE_MAX_DEPTH if max_depth is None else max_depth
        )

    def identify(
        self,
        root: Dict,
        context: GenerationContext,
        parent_id: Optional[str] = None,
    ) -> Dict[str, ComponentInfo]:
        """Populate context.components from the tree under `root`."""
        self._visit(root, 0, parent_id, context, is_unit_root=True)
        logger.debug(
            f"identify: root={root.get('id') if root else None}, "
            f"boundaries={[info.name for info in context.components.values()]}"
        )
        return context.components

    def _visit(
        self,
        node: Optional[Dict],
        depth: int,
        parent_id: Optional[str],
        context: GenerationContext,
        is_unit_root: bool = False,
    ) -> None:
        if not node:
            return

        node_id = node.get("id")
        if self.is_boundary(node, depth):
            name = node.get("name") or f"Component{context.next_anonymous_index()}"
            context.register_component(
                node_id, ComponentInfo(to_pascal_case(name), node, parent_id)
            )
            if not is_unit_root:
                return

        for child in node.get("children") or []:
            self._visit(child, depth + 1, node_id, context)

    def is_boundary(self, node: Dict, depth: int) -> bool:
        if node_type(node) in _COMPONENT_TYPES:
            return True
        if self.is_component_candidate(node.get("name") or ""):
            return True
        children = node.get("children") or []
        return (
            len(children) >= self.min_children
            and depth < self.max_depth
            and self.has_repeated_structure(node)
        )

    def is_component_candidate(self, name: str) -> bool:
        lowered = name.lower()
        return any(keyword in lowered for keyword in self.keywords)

    @staticmethod
    def has_repeated_structure(node: Dict) -> bool:
        """First two children look like instances of one list item."""
        children = node.get("children") or []
        if len(children) < 2:
            return False
        first, second = children[0], children[1]
        if not first or not second:
            return False
        first_count = len(first.get("children") or [])
        second_count = len(second.get("children") or [])
        return (
            first.get("type") == second.get("type")
            and abs(first_count - second_count) <= 1
        )
