"""Typed theme records."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Theme:
    """A terminal color scheme.

    Every color is a lowercase ``#rrggbb`` string that styling libraries can
    consume directly.
    """

    name: str
    foreground: str
    background: str
    cursor: str
    # ANSI colors 0-7
    black: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str
    white: str
    # ANSI bright colors 8-15
    bright_black: str
    bright_red: str
    bright_green: str
    bright_yellow: str
    bright_blue: str
    bright_magenta: str
    bright_cyan: str
    bright_white: str

    def ansi_colors(self) -> tuple[str, ...]:
        """Return the 16 ANSI colors ordered by palette index."""
        return (
            self.black,
            self.red,
            self.green,
            self.yellow,
            self.blue,
            self.magenta,
            self.cyan,
            self.white,
            self.bright_black,
            self.bright_red,
            self.bright_green,
            self.bright_yellow,
            self.bright_blue,
            self.bright_magenta,
            self.bright_cyan,
            self.bright_white,
        )

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


THEME_FIELDS: tuple[str, ...] = (
    "name",
    "foreground",
    "background",
    "cursor",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)

COLOR_FIELDS: tuple[str, ...] = THEME_FIELDS[1:]
