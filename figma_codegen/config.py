"""Infrastructure configuration for figma_codegen.

Values come from environment variables; tunable generation thresholds live
in figma_codegen/settings.py. FIGMA_TOKEN is read by FigmaClient when it is
constructed, and LOG_DIR by logging_config when a logger is set up.
"""

import os

# Figma REST API base URL (override for proxies / recorded fixtures)
FIGMA_API_BASE = os.getenv("FIGMA_API_BASE", "https://api.figma.com")

# HTTP timeout for Figma API calls (seconds)
FIGMA_HTTP_TIMEOUT = float(os.getenv("FIGMA_HTTP_TIMEOUT", "60.0"))

# Where the CLI writes generated files when --output-dir is not given
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "./output")
