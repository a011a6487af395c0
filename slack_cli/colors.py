import re

from .errors import InvalidColor

named_colors = {
    "good": "#36a64f",
    "success": "#36a64f",
    "warning": "#daa038",
    "danger": "#a30200",
    "error": "#a30200",
}

HEX_COLOR_RE = re.compile(r"#[0-9a-f]{6}")


def resolve_color(color: str) -> str:
    """
    Map a user-supplied color to a `#rrggbb` hex string for an attachment.

    Accepts one of the keywords in `named_colors` or a hex color such as
    "#FF0000". Matching is case-insensitive and hex colors are lowercased.

    :raises InvalidColor: If `color` is neither a keyword nor a hex color
    """
    lowered = color.lower()
    if lowered in named_colors:
        return named_colors[lowered]
    if HEX_COLOR_RE.fullmatch(lowered):
        return lowered
    raise InvalidColor(color)
