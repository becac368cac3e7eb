"""Output dialect interface.

A dialect turns one analysed unit into files. Markup and styles go
through the shared transformers (parameterised by the dialect's
MarkupSyntax); assembly into source files is dialect specific.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..context import GenerationContext
from ..models import GenerationConfig
from ..transformers.markup import JSX_SYNTAX, MarkupSyntax, MarkupTransformer
from ..transformers.styles import StyleTransformer


@dataclass
class UnitRequest:
    """Everything an assembler needs for one generated unit.

    Attributes:
        name: PascalCase unit name (file and component name)
        markup: Rendered markup, already formatted
        styles: Rendered stylesheet
        context: The unit's populated generation context
        is_sub_component: False only for the top-level unit
        used_boundary_ids: Boundary node ids referenced by this unit, in document order
    """
    name: str
    markup: str
    styles: str
    context: GenerationContext
    is_sub_component: bool = False
    used_boundary_ids: List[str] = field(default_factory=list)

    def referenced_components(self) -> List[str]:
        """Distinct component names to import, excluding the unit itself."""
        names: List[str] = []
        for boundary_id in self.used_boundary_ids:
            info = self.context.components.get(boundary_id)
            if info is None or info.name == self.name or info.name in names:
                continue
            names.append(info.name)
        return names


class OutputDialect(ABC):
    """Base class for markup dialects (react, vue, html)."""

    name: str = ""
    syntax: MarkupSyntax = JSX_SYNTAX
    supports_components: bool = True
    markup_depth: int = 0

    def __init__(self, config: Optional[GenerationConfig] = None):
        self.config = config or GenerationConfig()

    def render_markup(self, node: Dict, context: GenerationContext, unit_name: str) -> str:
        transformer = MarkupTransformer(context, self.syntax)
        return transformer.format(transformer.render(node, self.markup_depth, unit_name))

    def render_styles(self, node: Dict, unit_name: str) -> str:
        return StyleTransformer().emit(node, unit_name)

    def unit_dir(self, name: str) -> str:
        """Directory prefix of a unit's files ('' at the output root)."""
        if self.config.componentize and self.supports_components:
            return f"components/{name}/"
        return ""

    @abstractmethod
    def assemble_unit(self, request: UnitRequest) -> Dict[str, str]:
        """Return {relative path: file content} for one unit."""
