"""Style value helpers: colours, canonical spacing/radius tokens, base stylesheet."""

from typing import Dict, Optional

# Canonical tokens: common literal pixel values -> named CSS variables
SPACING_TOKENS = {
    4: "var(--spacing-xs)",
    8: "var(--spacing-sm)",
    16: "var(--spacing-md)",
    24: "var(--spacing-lg)",
    32: "var(--spacing-xl)",
}
GAP_TOKENS = {
    8: "var(--spacing-sm)",
    16: "var(--spacing-md)",
    24: "var(--spacing-lg)",
}
RADIUS_TOKENS = {
    4: "var(--border-radius-sm)",
    8: "var(--border-radius-md)",
    12: "var(--border-radius-lg)",
}

TRANSPARENT = "rgba(0, 0, 0, 0)"


def format_number(value: float) -> str:
    """Render a CSS number: integral values without decimals, else 2 places."""
    rounded = round(float(value), 2)
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)


def px(value: float) -> str:
    return f"{format_number(value)}px"


def rgba_to_css(color: Optional[Dict], opacity: Optional[float] = None) -> str:
    """Convert Figma RGBA float dict {r,g,b,a} (+ paint opacity) to rgba()."""
    if not color:
        return "transparent"
    r = round(color.get("r", 0) * 255)
    g = round(color.get("g", 0) * 255)
    b = round(color.get("b", 0) * 255)
    a = color.get("a", 1.0) * (1.0 if opacity is None else opacity)
    return f"rgba({r}, {g}, {b}, {format_number(a)})"


def is_transparent(css_color: str) -> bool:
    return css_color in (TRANSPARENT, "transparent")


def _token(value: float, tokens: Dict[int, str]) -> str:
    if float(value).is_integer() and int(value) in tokens:
        return tokens[int(value)]
    return px(value)


def get_spacing_var(value: float) -> str:
    return _token(value, SPACING_TOKENS)


def get_gap_var(value: float) -> str:
    return _token(value, GAP_TOKENS)


def get_radius_var(value: float) -> str:
    return _token(value, RADIUS_TOKENS)


BASE_STYLES = """/* Design tokens */
:root {
  --spacing-xs: 4px;
  --spacing-sm: 8px;
  --spacing-md: 16px;
  --spacing-lg: 24px;
  --spacing-xl: 32px;
  --border-radius-sm: 4px;
  --border-radius-md: 8px;
  --border-radius-lg: 12px;
  --transition-base: 0.2s ease;
}

/* Base reset */
* {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}

*,
*::before,
*::after {
  box-sizing: inherit;
}"""
