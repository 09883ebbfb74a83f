"""Terminal color schemes from iTerm2-Color-Schemes as ready-to-use records.

All colors are lowercase hex strings (``"#282a36"``) that styling libraries
accept without conversion::

    from termthemes import get_theme

    theme = get_theme("Dracula")
    print(theme.foreground)  # #f8f8f2
"""

from .models import Theme
from .registry import ThemeNotFound, get_all_themes, get_theme, list_themes

__all__ = [
    "Theme",
    "ThemeNotFound",
    "get_all_themes",
    "get_theme",
    "list_themes",
]
