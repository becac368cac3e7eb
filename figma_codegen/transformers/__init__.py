from .markup import HTML_SYNTAX, JSX_SYNTAX, VUE_SYNTAX, MarkupSyntax, MarkupTransformer
from .styles import StyleTransformer, build_rule_body, extract_style_inputs, style_key

__all__ = [
    "MarkupSyntax",
    "MarkupTransformer",
    "JSX_SYNTAX",
    "VUE_SYNTAX",
    "HTML_SYNTAX",
    "StyleTransformer",
    "build_rule_body",
    "extract_style_inputs",
    "style_key",
]
