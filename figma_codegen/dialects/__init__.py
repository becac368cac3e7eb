from ..context import resolve_handler_kind
from .base import OutputDialect, UnitRequest
from .registry import (
    DIALECT_CLASSES,
    create_dialect,
    get_dialect_class,
    is_dialect_registered,
    list_dialects,
    register_dialect,
)

# Importing the implementations registers them
from .html import HtmlDialect
from .react import ReactDialect, TemplateAssembler
from .vue import VueDialect

__all__ = [
    "OutputDialect",
    "UnitRequest",
    "resolve_handler_kind",
    "DIALECT_CLASSES",
    "create_dialect",
    "get_dialect_class",
    "is_dialect_registered",
    "list_dialects",
    "register_dialect",
    "HtmlDialect",
    "ReactDialect",
    "TemplateAssembler",
    "VueDialect",
]
