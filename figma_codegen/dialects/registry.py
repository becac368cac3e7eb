"""Dialect registry.

Dialects register themselves with @register_dialect; create_dialect()
instantiates the one named by a GenerationConfig.

Example:
    @register_dialect("react")
    class ReactDialect(OutputDialect):
        def assemble_unit(self, request):
            ...
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Type, TypeVar

from ..models import GenerationConfig
from .base import OutputDialect

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=OutputDialect)

DIALECT_CLASSES: Dict[str, Type[OutputDialect]] = {}


def register_dialect(name: str) -> Callable[[Type[T]], Type[T]]:
    """Decorator to register an OutputDialect subclass under `name`."""

    def decorator(cls: Type[T]) -> Type[T]:
        cls.name = name
        DIALECT_CLASSES[name] = cls
        logger.debug(f"Registered output dialect: {name} ({cls.__name__})")
        return cls

    return decorator


def create_dialect(config: Optional[GenerationConfig] = None) -> OutputDialect:
    """Instantiate the dialect named by config.output_dialect.

    Raises:
        ValueError: If the dialect is not registered
    """
    config = config or GenerationConfig()
    dialect_name = config.output_dialect
    if dialect_name not in DIALECT_CLASSES:
        raise ValueError(
            f"Unknown output dialect: {dialect_name}. "
            f"Available dialects: {list_dialects()}"
        )
    return DIALECT_CLASSES[dialect_name](config)


def get_dialect_class(name: str) -> Optional[Type[OutputDialect]]:
    return DIALECT_CLASSES.get(name)


def list_dialects() -> List[str]:
    return sorted(DIALECT_CLASSES)


def is_dialect_registered(name: str) -> bool:
    return name in DIALECT_CLASSES
