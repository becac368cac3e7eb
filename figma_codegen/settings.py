"""Generation settings: tunable thresholds for the code generation pipeline.

All values read from environment variables with defaults matching the
heuristics the generator was designed around. Import from here instead of
hardcoding.

Infrastructure config (Figma token, API base, output directory) stays
in figma_codegen/config.py.
"""

from __future__ import annotations

import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


# =====================================================================
# State / handler shape
# =====================================================================

# More state variables than this -> one aggregated state record
STATE_AGGREGATION_THRESHOLD = _int("STATE_AGGREGATION_THRESHOLD", 3)

# More state variables or handlers than this -> memoized handlers
HANDLER_MEMOIZE_THRESHOLD = _int("HANDLER_MEMOIZE_THRESHOLD", 3)


# =====================================================================
# Component boundary heuristics
# =====================================================================

# Repeated-structure rule: minimum child count and maximum tree depth
REPEATED_STRUCTURE_MIN_CHILDREN = _int("REPEATED_STRUCTURE_MIN_CHILDREN", 3)
REPEATED_STRUCTURE_MAX_DEPTH = _int("REPEATED_STRUCTURE_MAX_DEPTH", 3)


# =====================================================================
# Styles / naming
# =====================================================================

# Pixel tolerance when inferring row vs column from child positions
LAYOUT_INFERENCE_TOLERANCE = _float("LAYOUT_INFERENCE_TOLERANCE", 10.0)

# camelCase identifiers longer than this get shortened
CAMEL_CASE_MAX_LENGTH = _int("CAMEL_CASE_MAX_LENGTH", 30)

# Default markup dialect when none is configured
DEFAULT_DIALECT = _str("DEFAULT_DIALECT", "react")
