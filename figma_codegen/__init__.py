"""Figma design -> component source code generator."""

from .generator import CodeGenerator, generate
from .models import GenerationConfig

__all__ = ["CodeGenerator", "GenerationConfig", "generate"]

__version__ = "0.1.0"
