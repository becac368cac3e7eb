from .component_analyzer import ComponentAnalyzer
from .interactive_analyzer import InteractiveElementAnalyzer
from .keywords import COMPONENT_KEYWORDS, INTERACTION_KEYWORDS

__all__ = [
    "ComponentAnalyzer",
    "InteractiveElementAnalyzer",
    "COMPONENT_KEYWORDS",
    "INTERACTION_KEYWORDS",
]
