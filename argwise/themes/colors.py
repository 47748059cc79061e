# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palettes and the Rich theme used when rendering parse results.

`OneColors` and `NordColors` expose hex colors as class attributes so they can
be dropped straight into Rich markup (`f"[{OneColors.GREEN}]text"`).
`get_nord_theme()` builds the `rich.theme.Theme` used by the shared console.
"""
from rich.style import Style
from rich.theme import Theme


class OneColors:
    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"


class NordColors:
    POLAR_NIGHT_ORIGIN = "#2E3440"
    POLAR_NIGHT_BRIGHTEST = "#4C566A"
    SNOW_STORM_BRIGHTEST = "#ECEFF4"
    FROST_TEAL = "#8FBCBB"
    FROST_ICE = "#88C0D0"
    FROST_SKY = "#81A1C1"
    FROST_DEEP = "#5E81AC"
    RED = "#BF616A"
    ORANGE = "#D08770"
    YELLOW = "#EBCB8B"
    GREEN = "#A3BE8C"
    PURPLE = "#B48EAD"


def get_nord_theme() -> Theme:
    """Return the Rich theme used by the Argwise console."""
    return Theme(
        {
            "table.title": Style(color=NordColors.FROST_DEEP, bold=True),
            "table.caption": Style(color=NordColors.POLAR_NIGHT_BRIGHTEST, italic=True),
            "table.header": Style(color=NordColors.FROST_ICE, bold=True),
            "logging.level.debug": Style(color=NordColors.FROST_TEAL),
            "logging.level.info": Style(color=NordColors.GREEN),
            "logging.level.warning": Style(color=NordColors.YELLOW),
            "logging.level.error": Style(color=NordColors.RED, bold=True),
            "logging.level.critical": Style(color=NordColors.ORANGE, bold=True),
        }
    )
