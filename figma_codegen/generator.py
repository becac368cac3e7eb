"""Generation controller.

CodeGenerator.generate() normalizes the design tree and produces one unit
for the root. Every boundary the unit references is then generated as its
own unit, recursively, inside an isolated context: the live context is
snapshotted and reset before the nested unit runs and restored afterwards,
whether or not the nested generation raised.

Usage:
    generator = CodeGenerator(GenerationConfig(typed=True))
    files = generator.generate(document)   # {relative path: content}
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Set

from .analyzers import ComponentAnalyzer, InteractiveElementAnalyzer
from .context import GenerationContext
from .dialects import OutputDialect, UnitRequest, create_dialect
from .models import ComponentInfo, GenerationConfig
from .naming import to_pascal_case
from .preprocess import normalize

logger = logging.getLogger(__name__)


def collect_used_boundaries(node: Optional[Dict], components: Dict[str, ComponentInfo]) -> List[str]:
    """Boundary ids present under `node` (inclusive), in document order."""
    used: List[str] = []
    stack = [node] if node else []
    while stack:
        current = stack.pop()
        node_id = current.get("id")
        if node_id in components and node_id not in used:
            used.append(node_id)
        children = [c for c in current.get("children") or [] if c]
        stack.extend(reversed(children))
    return used


class CodeGenerator:
    """Drives analysis, transformation and assembly for every unit."""

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        dialect: Optional[OutputDialect] = None,
    ):
        self.config = config or GenerationConfig()
        self.dialect = dialect or create_dialect(self.config)
        self.context = GenerationContext()
        self.component_analyzer = ComponentAnalyzer()
        self.interactive_analyzer = InteractiveElementAnalyzer()

    @property
    def componentize(self) -> bool:
        return self.config.componentize and self.dialect.supports_components

    def generate(self, root: Optional[Dict]) -> Dict[str, str]:
        """Generate every file for the design tree under `root`.

        Raises:
            ValueError: If root is empty
        """
        normalized = normalize(root)
        if normalized is None:
            raise ValueError("Cannot generate code from an empty design node")

        self.context.reset()
        unit_name = self.config.component_name or to_pascal_case(normalized.get("name") or "")
        files: Dict[str, str] = {}
        emitted: Set[str] = {unit_name}

        self._generate_unit(normalized, unit_name, None, False, files, emitted)

        logger.info(
            f"generate: root={unit_name}, dialect={self.dialect.name}, "
            f"units={len(emitted)}, files={len(files)}"
        )
        return files

    def _generate_unit(
        self,
        node: Dict,
        name: str,
        parent_id: Optional[str],
        is_sub_component: bool,
        files: Dict[str, str],
        emitted: Set[str],
    ) -> None:
        context = self.context
        root_id = node.get("id")

        self.interactive_analyzer.classify(node, context)

        used: List[str] = []
        if self.componentize:
            self.component_analyzer.identify(node, context, parent_id)
            if root_id in context.components:
                # The unit's own root always answers to the unit name
                context.components[root_id].name = name
            used = collect_used_boundaries(node, context.components)

        markup = self.dialect.render_markup(node, context, name)
        styles = self.dialect.render_styles(node, name)
        files.update(self.dialect.assemble_unit(UnitRequest(
            name=name,
            markup=markup,
            styles=styles,
            context=context,
            is_sub_component=is_sub_component,
            used_boundary_ids=used,
        )))
        logger.info(
            f"Generated unit {name}: interactive={len(context.interactive_elements)}, "
            f"state={len(context.state_variables)}, handlers={len(context.event_handlers)}, "
            f"references={len(used)}"
        )

        for boundary_id in used:
            info = context.components[boundary_id]
            if boundary_id == root_id or info.name in emitted:
                continue
            emitted.add(info.name)
            with self._isolated_context():
                self._generate_unit(info.node, info.name, info.parent_id, True, files, emitted)

    @contextmanager
    def _isolated_context(self) -> Iterator[GenerationContext]:
        saved = self.context.snapshot()
        self.context.reset()
        try:
            yield self.context
        finally:
            self.context.restore(saved)


def generate(root: Optional[Dict], config: Optional[GenerationConfig] = None) -> Dict[str, str]:
    """Generate files for `root` with a fresh CodeGenerator."""
    return CodeGenerator(config).generate(root)
