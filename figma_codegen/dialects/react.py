"""React dialect: function components with hooks.

Per unit: `<Name>.tsx` (or `.jsx`), `<Name>.css` and, when typed,
`<Name>.types.ts`. More than STATE_AGGREGATION_THRESHOLD state variables
collapse into one `state` record; more than HANDLER_MEMOIZE_THRESHOLD
state variables or handlers wrap every handler in useCallback.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Union

from .. import settings
from ..context import GenerationContext, resolve_handler_kind
from ..models import EventHandler, HandlerKind
from ..naming import handler_name, to_pascal_case
from ..transformers.markup import JSX_SYNTAX
from .base import OutputDialect, UnitRequest
from .registry import register_dialect

logger = logging.getLogger(__name__)

CHANGE_EVENT = "React.ChangeEvent<HTMLInputElement>"


def js_literal(value: Union[str, bool]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def needs_memoization(context: GenerationContext) -> bool:
    threshold = settings.HANDLER_MEMOIZE_THRESHOLD
    return len(context.state_variables) > threshold or len(context.event_handlers) > threshold


class TemplateAssembler:
    """Builds the component source and its type declarations."""

    def __init__(self, typed: bool = True):
        self.typed = typed

    # -- component source ----------------------------------------------

    def build_source(self, request: UnitRequest) -> str:
        name = request.name
        context = request.context
        memoize = needs_memoization(context)

        sections = [self._imports(request, memoize), self._signature(name)]
        body = [
            part for part in (
                self._state_declarations(name, context),
                self._handlers(name, context, memoize),
            )
            if part
        ]
        body.append(self._render_block(request.markup))

        if request.is_sub_component:
            export = f"export {{ {name} }};\nexport default {name};"
        else:
            export = f"export default {name};"

        return (
            f"{sections[0]}\n\n"
            f"{sections[1]}\n"
            + "\n\n".join(body)
            + f"\n}};\n\n{export}\n"
        )

    def _imports(self, request: UnitRequest, memoize: bool) -> str:
        name = request.name
        context = request.context
        hooks: List[str] = []
        if context.state_variables:
            hooks.append("useState")
        if memoize and context.event_handlers:
            hooks.append("useCallback")

        lines = [
            f"import React, {{ {', '.join(hooks)} }} from 'react';" if hooks
            else "import React from 'react';"
        ]
        for component in request.referenced_components():
            lines.append(f"import {{ {component} }} from '../{component}/{component}';")
        lines.append(f"import './{name}.css';")
        if self.typed:
            types = [f"{name}Props"]
            if context.use_aggregated_state:
                types.append(f"{name}State")
            lines.append(f"import type {{ {', '.join(types)} }} from './{name}.types';")
        return "\n".join(lines)

    def _signature(self, name: str) -> str:
        if self.typed:
            return f"const {name}: React.FC<{name}Props> = () => {{"
        return f"const {name} = () => {{"

    def _state_declarations(self, name: str, context: GenerationContext) -> str:
        variables = context.state_variables
        if not variables:
            return ""
        if context.use_aggregated_state:
            type_arg = f"<{name}State>" if self.typed else ""
            fields = ",\n".join(
                f"    {v.identifier}: {js_literal(v.default)}" for v in variables
            )
            return f"  const [state, setState] = useState{type_arg}({{\n{fields}\n  }});"

        lines = []
        for v in variables:
            type_arg = f"<{v.type.value}>" if self.typed else ""
            lines.append(
                f"  const [{v.identifier}, set{to_pascal_case(v.identifier)}] = "
                f"useState{type_arg}({js_literal(v.default)});"
            )
        return "\n".join(lines)

    def _handlers(self, name: str, context: GenerationContext, memoize: bool) -> str:
        blocks = [self._handler(name, handler, context, memoize) for handler in context.event_handlers]
        return "\n\n".join(blocks)

    def _handler(
        self,
        name: str,
        handler: EventHandler,
        context: GenerationContext,
        memoize: bool,
    ) -> str:
        kind = resolve_handler_kind(handler, context)
        identifier = handler.identifier
        bound = context.get_state_variable(identifier) is not None
        aggregated = context.use_aggregated_state
        prev = f"(prev: {name}State)" if self.typed else "(prev)"

        params = "()"
        if kind == HandlerKind.CHANGE and bound:
            params = f"(e: {CHANGE_EVENT})" if self.typed else "(e)"
            if aggregated:
                statement = f"setState({prev} => ({{ ...prev, {identifier}: e.target.value }}));"
            else:
                statement = f"set{to_pascal_case(identifier)}(e.target.value);"
        elif kind == HandlerKind.TOGGLE and bound:
            if aggregated:
                statement = f"setState({prev} => ({{ ...prev, {identifier}: !prev.{identifier} }}));"
            else:
                statement = f"set{to_pascal_case(identifier)}(prev => !prev);"
        elif kind == HandlerKind.CLICK:
            statement = "// Add click behaviour here"
        else:
            statement = "// Add event handling here"

        function = f"{params} => {{\n    {statement}\n  }}"
        if memoize:
            function = f"useCallback({function}, [])"
        return f"  const {handler_name(identifier, kind)} = {function};"

    @staticmethod
    def _render_block(markup: str) -> str:
        if not markup.strip():
            return "  return null;"
        return f"  return (\n{markup}\n  );"

    # -- type declarations -----------------------------------------------

    def build_types(self, request: UnitRequest) -> str:
        name = request.name
        context = request.context
        kinds = [
            (handler, resolve_handler_kind(handler, context))
            for handler in context.event_handlers
        ]

        parts = []
        if any(kind == HandlerKind.CHANGE for _, kind in kinds):
            parts.append("import type React from 'react';")

        parts.append(
            f"/**\n * {name} component props\n */\n"
            f"export interface {name}Props {{\n  className?: string;\n}}"
        )

        if context.state_variables:
            fields = "\n".join(
                f"  {v.identifier}: {v.type.value};" for v in context.state_variables
            )
            parts.append(f"export interface {name}State {{\n{fields}\n}}")

        entries = []
        for handler, kind in kinds:
            if kind == HandlerKind.CHANGE:
                signature = f"(e: {CHANGE_EVENT}) => void"
            else:
                signature = "() => void"
            entries.append(f"  {handler_name(handler.identifier, kind)}: {signature};")
        handlers_body = "\n" + "\n".join(entries) + "\n" if entries else ""
        parts.append(
            f"/**\n * {name} event handlers\n */\n"
            f"export interface {name}Handlers {{{handlers_body}}}"
        )

        return "\n\n".join(parts) + "\n"


@register_dialect("react")
class ReactDialect(OutputDialect):
    """Function components (TSX when typed, JSX otherwise)."""

    syntax = JSX_SYNTAX
    markup_depth = 2

    def assemble_unit(self, request: UnitRequest) -> Dict[str, str]:
        assembler = TemplateAssembler(typed=self.config.typed)
        prefix = self.unit_dir(request.name)
        extension = "tsx" if self.config.typed else "jsx"

        files = {
            f"{prefix}{request.name}.{extension}": assembler.build_source(request),
            f"{prefix}{request.name}.css": request.styles,
        }
        if self.config.typed:
            files[f"{prefix}{request.name}.types.ts"] = assembler.build_types(request)

        logger.debug(f"assemble_unit: {request.name} -> {sorted(files)}")
        return files
