"""Vue dialect: one `<script setup>` single-file component per unit."""

from __future__ import annotations

import logging
from typing import Dict, List

from ..context import GenerationContext, resolve_handler_kind
from ..models import EventHandler, HandlerKind
from ..naming import handler_name
from ..transformers.markup import VUE_SYNTAX
from .base import OutputDialect, UnitRequest
from .react import js_literal
from .registry import register_dialect

logger = logging.getLogger(__name__)


@register_dialect("vue")
class VueDialect(OutputDialect):
    """`<Name>.vue` with `ref` state (or one `reactive` record when aggregated)."""

    syntax = VUE_SYNTAX
    markup_depth = 1

    def assemble_unit(self, request: UnitRequest) -> Dict[str, str]:
        path = f"{self.unit_dir(request.name)}{request.name}.vue"
        content = "\n\n".join([
            self._template(request.markup),
            self._script(request),
            f"<style scoped>\n{request.styles}\n</style>",
        ]) + "\n"
        logger.debug(f"assemble_unit: {request.name} -> {path}")
        return {path: content}

    @staticmethod
    def _template(markup: str) -> str:
        if not markup.strip():
            return "<template>\n</template>"
        return f"<template>\n{markup}\n</template>"

    def _script(self, request: UnitRequest) -> str:
        context = request.context
        lang = ' lang="ts"' if self.config.typed else ""

        apis: List[str] = []
        if context.state_variables:
            apis.append("reactive" if context.use_aggregated_state else "ref")
        lines = [f"import {{ {', '.join(apis)} }} from 'vue';"] if apis else []
        for component in request.referenced_components():
            lines.append(f"import {component} from '../{component}/{component}.vue';")

        sections = ["\n".join(lines)] if lines else []
        state = self._state(context)
        if state:
            sections.append(state)
        sections.extend(self._handler(h, context) for h in context.event_handlers)

        return f"<script setup{lang}>\n" + "\n\n".join(sections) + "\n</script>"

    def _state(self, context: GenerationContext) -> str:
        variables = context.state_variables
        if not variables:
            return ""
        if context.use_aggregated_state:
            fields = ",\n".join(f"  {v.identifier}: {js_literal(v.default)}" for v in variables)
            return f"const state = reactive({{\n{fields}\n}});"
        lines = []
        for v in variables:
            type_arg = f"<{v.type.value}>" if self.config.typed else ""
            lines.append(f"const {v.identifier} = ref{type_arg}({js_literal(v.default)});")
        return "\n".join(lines)

    def _handler(self, handler: EventHandler, context: GenerationContext) -> str:
        kind = resolve_handler_kind(handler, context)
        identifier = handler.identifier
        bound = context.get_state_variable(identifier) is not None
        target = f"state.{identifier}" if context.use_aggregated_state else f"{identifier}.value"

        params = ""
        if kind == HandlerKind.CHANGE and bound:
            params = "e: Event" if self.config.typed else "e"
            value = "(e.target as HTMLInputElement).value" if self.config.typed else "e.target.value"
            statement = f"{target} = {value};"
        elif kind == HandlerKind.TOGGLE and bound:
            statement = f"{target} = !{target};"
        elif kind == HandlerKind.CLICK:
            statement = "// Add click behaviour here"
        else:
            statement = "// Add event handling here"

        return f"function {handler_name(identifier, kind)}({params}) {{\n  {statement}\n}}"
