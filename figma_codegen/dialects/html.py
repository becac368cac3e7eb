"""Static HTML dialect: one page, one stylesheet, no components or bindings."""

from __future__ import annotations

import logging
from typing import Dict

from ..transformers.markup import HTML_SYNTAX
from .base import OutputDialect, UnitRequest
from .registry import register_dialect

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <link rel="stylesheet" href="styles.css">
</head>
<body>
{body}
</body>
</html>
"""


@register_dialect("html")
class HtmlDialect(OutputDialect):
    """Boundaries are rendered inline; controls keep their tags but get no handlers."""

    syntax = HTML_SYNTAX
    supports_components = False
    markup_depth = 1

    def assemble_unit(self, request: UnitRequest) -> Dict[str, str]:
        logger.debug(f"assemble_unit: {request.name} -> index.html, styles.css")
        return {
            "index.html": PAGE_TEMPLATE.format(title=request.name, body=request.markup),
            "styles.css": request.styles + "\n",
        }
