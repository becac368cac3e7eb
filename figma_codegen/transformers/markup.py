"""Design tree -> markup text.

One MarkupTransformer renders one unit. Dialect differences (attribute
names, event/value binding syntax) are carried by a MarkupSyntax value;
the structural rules are shared:

1. Wrapper elision: unstyled FRAME/GROUP with one child renders the child
   (a boundary referenced from this unit is never elided)
2. Boundary substitution: registered boundaries render as a reference tag
3. Interactive remapping: button / input tags and bindings
4. Text leaves
5. Children, one level deeper
6. Self-closing controls with children get a wrapping div
7. Void elision
8. Single-text-child collapse
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..context import GenerationContext, resolve_handler_kind
from ..models import EventHandler, HandlerKind, InteractionKind, InteractiveElement
from ..naming import handler_name
from ..node_utils import (
    STRUCTURAL_TYPES,
    derive_class_name,
    escape_text,
    has_meaningful_style,
    has_visual_style,
    is_self_closing,
    map_figma_type_to_tag,
    node_type,
)

logger = logging.getLogger(__name__)

INDENT = "  "


@dataclass(frozen=True)
class MarkupSyntax:
    """Attribute spelling of one markup dialect."""
    class_attr: str = "className"
    click: str = "onClick={{{handler}}}"
    change: str = "onChange={{{handler}}}"
    value: str = "value={{{ref}}}"
    bindings: bool = True


JSX_SYNTAX = MarkupSyntax()

VUE_SYNTAX = MarkupSyntax(
    class_attr="class",
    click='@click="{handler}"',
    change='@input="{handler}"',
    value=':value="{ref}"',
)

HTML_SYNTAX = MarkupSyntax(class_attr="class", bindings=False)


class MarkupTransformer:
    """Renders a (normalized) design tree for one generated unit."""

    def __init__(self, context: GenerationContext, syntax: MarkupSyntax = JSX_SYNTAX):
        self.context = context
        self.syntax = syntax

    def render(
        self,
        node: Optional[Dict],
        depth: int = 0,
        current_component_name: Optional[str] = None,
    ) -> str:
        if not node:
            return ""

        node_id = node.get("id")
        children: List[Dict] = [c for c in node.get("children") or [] if c]
        element = self.context.interactive_elements.get(node_id)

        if self._is_elidable_wrapper(node, element, children, current_component_name):
            return self.render(children[0], depth, current_component_name)

        indent = INDENT * depth
        class_name = derive_class_name(node)

        info = self.context.components.get(node_id)
        if info is not None and info.name != current_component_name:
            return f"{indent}<{info.name}{self._attrs([self._class(class_name)])} />"

        tag = map_figma_type_to_tag(node_type(node))
        props: List[str] = []
        events: List[str] = []
        if element is not None:
            tag = self._bind_interactive(element, props, events, tag)

        attrs = self._attrs([self._class(class_name)] + props + events)

        if node_type(node) == "TEXT" and node.get("characters"):
            text = escape_text(node["characters"])
            if is_self_closing(tag):
                return f'{indent}<{tag}{attrs} placeholder="{text}" />'
            return f"{indent}<{tag}{attrs}>{text}</{tag}>"

        rendered = [
            r for r in (
                self.render(child, depth + 1, current_component_name)
                for child in children
            )
            if r.strip()
        ]

        if is_self_closing(tag):
            if not rendered:
                return f"{indent}<{tag}{attrs} />"
            control = f"{indent}{INDENT}<{tag}{self._attrs(props + events)} />"
            return "\n".join(
                [f"{indent}<div{self._attrs([self._class(class_name)])}>", control]
                + rendered
                + [f"{indent}</div>"]
            )

        styled = has_meaningful_style(node)
        if not styled and not rendered and element is None:
            return ""

        if (
            rendered
            and len(children) == 1
            and not styled
            and element is None
            and self._is_plain_text(children[0])
        ):
            return f"{indent}{escape_text(children[0]['characters'])}"

        if not rendered:
            return f"{indent}<{tag}{attrs}></{tag}>"
        return "\n".join([f"{indent}<{tag}{attrs}>"] + rendered + [f"{indent}</{tag}>"])

    def format(self, markup: str) -> str:
        """Collapse runs of blank lines."""
        if not markup:
            return ""
        lines = markup.split("\n")
        kept = [
            line for i, line in enumerate(lines)
            if not (line.strip() == "" and i + 1 < len(lines) and lines[i + 1].strip() == "")
        ]
        return "\n".join(kept)

    # ------------------------------------------------------------------

    def _is_elidable_wrapper(
        self,
        node: Dict,
        element: Optional[InteractiveElement],
        children: List[Dict],
        current_component_name: Optional[str],
    ) -> bool:
        info = self.context.components.get(node.get("id"))
        if info is not None and info.name != current_component_name:
            return False
        return (
            node_type(node) in STRUCTURAL_TYPES
            and element is None
            and len(children) == 1
            and not has_visual_style(node)
        )

    def _is_plain_text(self, child: Dict) -> bool:
        child_id = child.get("id")
        return (
            node_type(child) == "TEXT"
            and bool(child.get("characters"))
            and child_id not in self.context.interactive_elements
            and child_id not in self.context.components
        )

    def _bind_interactive(
        self,
        element: InteractiveElement,
        props: List[str],
        events: List[str],
        tag: str,
    ) -> str:
        """Fill props/events for a control; returns the output tag."""
        bind = self.syntax.bindings
        identifier = element.identifier
        # Named after the handler registered for the identifier, which the
        # first control carrying it decides
        kind = resolve_handler_kind(EventHandler(identifier, HandlerKind.CLICK), self.context)
        handler = handler_name(identifier, kind)

        if element.kind == InteractionKind.BUTTON:
            if bind:
                events.append(self.syntax.click.format(handler=handler))
            return "button"

        if element.kind == InteractionKind.INPUT:
            props.append('type="text"')
            if bind and kind == HandlerKind.CHANGE:
                ref = f"state.{identifier}" if self.context.use_aggregated_state else identifier
                props.append(self.syntax.value.format(ref=ref))
                events.append(self.syntax.change.format(handler=handler))
            elif bind:
                events.append(self.syntax.click.format(handler=handler))
            return "input"

        if bind:
            events.append(self.syntax.click.format(handler=handler))
        return tag

    def _class(self, class_name: str) -> str:
        if not class_name:
            return ""
        return f'{self.syntax.class_attr}="{class_name}"'

    @staticmethod
    def _attrs(parts: List[str]) -> str:
        joined = " ".join(p for p in parts if p)
        return f" {joined}" if joined else ""
