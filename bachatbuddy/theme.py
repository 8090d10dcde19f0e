"""The grayscale colour palette and the light and dark themes built from it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Palette(Enum):
    """Grayscale shades, from lightest to darkest, as RGB triples."""

    WHITE_SMOKE = (248, 249, 250)
    LIGHT_GRAY = (233, 236, 239)
    PLATINUM = (222, 226, 230)
    FRENCH_GRAY = (206, 212, 218)
    CADET_GRAY = (173, 181, 189)
    SLATE_GRAY = (108, 117, 125)
    DARK_SLATE_GRAY = (73, 80, 87)
    GUNMETAL = (52, 58, 64)
    RICH_BLACK = (33, 37, 41)

    def hex(self) -> str:
        """Return the colour as an upper-case ``#RRGGBB`` string."""
        red, green, blue = self.value
        return f"#{red:02X}{green:02X}{blue:02X}"


# A button under the pointer lights up, and drops back to this shade when left.
HOVER_BACKGROUND = Palette.SLATE_GRAY
REST_BACKGROUND = Palette.DARK_SLATE_GRAY


@dataclass(frozen=True)
class Theme:
    """The colour of each part of the window."""

    panel_bg: Palette
    box_fg: Palette
    header_bg: Palette
    header_fg: Palette
    label_fg: Palette
    input_bg: Palette
    input_fg: Palette
    button_bg: Palette
    button_fg: Palette
    toggle_bg: Palette
    toggle_fg: Palette
    list_bg: Palette
    list_fg: Palette


LIGHT = Theme(
    panel_bg=Palette.WHITE_SMOKE,
    box_fg=Palette.DARK_SLATE_GRAY,
    header_bg=Palette.CADET_GRAY,
    header_fg=Palette.WHITE_SMOKE,
    label_fg=Palette.DARK_SLATE_GRAY,
    input_bg=Palette.LIGHT_GRAY,
    input_fg=Palette.GUNMETAL,
    button_bg=Palette.FRENCH_GRAY,
    button_fg=Palette.DARK_SLATE_GRAY,
    toggle_bg=Palette.SLATE_GRAY,
    toggle_fg=Palette.WHITE_SMOKE,
    list_bg=Palette.LIGHT_GRAY,
    list_fg=Palette.GUNMETAL,
)

DARK = Theme(
    panel_bg=Palette.RICH_BLACK,
    box_fg=Palette.WHITE_SMOKE,
    header_bg=Palette.GUNMETAL,
    header_fg=Palette.WHITE_SMOKE,
    label_fg=Palette.LIGHT_GRAY,
    input_bg=Palette.DARK_SLATE_GRAY,
    input_fg=Palette.WHITE_SMOKE,
    button_bg=Palette.DARK_SLATE_GRAY,
    button_fg=Palette.WHITE_SMOKE,
    toggle_bg=Palette.DARK_SLATE_GRAY,
    toggle_fg=Palette.WHITE_SMOKE,
    list_bg=Palette.GUNMETAL,
    list_fg=Palette.WHITE_SMOKE,
)


def theme_for(dark: bool) -> Theme:
    """Return the dark theme when *dark* is true, else the light one."""
    return DARK if dark else LIGHT