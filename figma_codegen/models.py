"""Data model for the code generation pipeline.

- GenerationConfig: caller-facing options (pydantic, validated)
- InteractiveElement / StateVariable / EventHandler / ComponentInfo:
  per-unit bookkeeping records held by GenerationContext

Design nodes themselves stay plain Figma JSON dicts (Dict[str, Any]).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, field_validator

from . import settings

logger = logging.getLogger(__name__)

SUPPORTED_DIALECTS = ("react", "html", "vue")


class InteractionKind(str, Enum):
    BUTTON = "button"
    INPUT = "input"
    ACCORDION = "accordion"
    TOGGLE = "toggle"


class StateType(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"


class HandlerKind(str, Enum):
    CLICK = "click"
    CHANGE = "change"
    TOGGLE = "toggle"


@dataclass
class InteractiveElement:
    """A node classified as an interactive control."""
    node_id: str
    kind: InteractionKind
    identifier: str  # reserved-word-safe camelCase
    name: str = ""   # original Figma layer name


@dataclass(frozen=True)
class StateVariable:
    """One state slot. Unique by identifier within a context."""
    identifier: str
    type: StateType
    default: Union[str, bool]


@dataclass(frozen=True)
class EventHandler:
    """One handler descriptor. Unique by identifier within a context."""
    identifier: str
    kind: HandlerKind


@dataclass
class ComponentInfo:
    """A boundary node that becomes its own generated unit.

    `node` is a reference into the normalized tree, not a copy.
    """
    name: str
    node: Dict[str, Any]
    parent_id: Optional[str] = None


class GenerationConfig(BaseModel):
    """Options consumed by CodeGenerator."""
    output_dialect: str = settings.DEFAULT_DIALECT  # react | html | vue
    typed: bool = True                  # emit TypeScript + .types.ts
    componentize: bool = True           # split boundaries into units
    css_framework: str = "none"         # passthrough, not interpreted
    component_name: Optional[str] = None  # overrides the root unit name

    @field_validator("output_dialect", mode="before")
    @classmethod
    def _normalize_dialect(cls, value: Any) -> str:
        dialect = str(value or "").strip().lower()
        if dialect not in SUPPORTED_DIALECTS:
            logger.warning(f"Unknown output dialect {value!r}, falling back to react")
            return "react"
        return dialect
