# Code generated by termthemes-generate; DO NOT EDIT.
"""Terminal color schemes embedded at build time."""

from __future__ import annotations

from .models import Theme

THEMES: dict[str, Theme] = {
    "Argonaut": Theme(
        name="Argonaut",
        foreground="#fffaf4",
        background="#0e1019",
        cursor="#ff0018",
        black="#232323",
        red="#ff000f",
        green="#8ce10b",
        yellow="#ffb900",
        blue="#008df8",
        magenta="#6d43a6",
        cyan="#00d8eb",
        white="#ffffff",
        bright_black="#444444",
        bright_red="#ff2740",
        bright_green="#abe15b",
        bright_yellow="#ffd242",
        bright_blue="#0092ff",
        bright_magenta="#9a5feb",
        bright_cyan="#67fff0",
        bright_white="#ffffff",
    ),
    "Builtin Dark": Theme(
        name="Builtin Dark",
        foreground="#bbbbbb",
        background="#000000",
        cursor="#bbbbbb",
        black="#000000",
        red="#bb0000",
        green="#00bb00",
        yellow="#bbbb00",
        blue="#0000bb",
        magenta="#bb00bb",
        cyan="#00bbbb",
        white="#bbbbbb",
        bright_black="#555555",
        bright_red="#ff5555",
        bright_green="#55ff55",
        bright_yellow="#ffff55",
        bright_blue="#5555ff",
        bright_magenta="#ff55ff",
        bright_cyan="#55ffff",
        bright_white="#ffffff",
    ),
    "Builtin Light": Theme(
        name="Builtin Light",
        foreground="#000000",
        background="#ffffff",
        cursor="#000000",
        black="#000000",
        red="#bb0000",
        green="#00bb00",
        yellow="#bbbb00",
        blue="#0000bb",
        magenta="#bb00bb",
        cyan="#00bbbb",
        white="#bbbbbb",
        bright_black="#555555",
        bright_red="#ff5555",
        bright_green="#55ff55",
        bright_yellow="#ffff55",
        bright_blue="#5555ff",
        bright_magenta="#ff55ff",
        bright_cyan="#55ffff",
        bright_white="#ffffff",
    ),
    "Builtin Pastel Dark": Theme(
        name="Builtin Pastel Dark",
        foreground="#bbbbbb",
        background="#000000",
        cursor="#ffa560",
        black="#4f4f4f",
        red="#ff6c60",
        green="#a8ff60",
        yellow="#ffffb6",
        blue="#96cbfe",
        magenta="#ff73fd",
        cyan="#c6c5fe",
        white="#eeeeee",
        bright_black="#7c7c7c",
        bright_red="#ffb6b0",
        bright_green="#ceffac",
        bright_yellow="#ffffcc",
        bright_blue="#b5dcff",
        bright_magenta="#ff9cfe",
        bright_cyan="#dfdffe",
        bright_white="#ffffff",
    ),
    "Builtin Solarized Dark": Theme(
        name="Builtin Solarized Dark",
        foreground="#839496",
        background="#002b36",
        cursor="#93a1a1",
        black="#073642",
        red="#dc322f",
        green="#859900",
        yellow="#b58900",
        blue="#268bd2",
        magenta="#d33682",
        cyan="#2aa198",
        white="#eee8d5",
        bright_black="#002b36",
        bright_red="#cb4b16",
        bright_green="#586e75",
        bright_yellow="#657b83",
        bright_blue="#839496",
        bright_magenta="#6c71c4",
        bright_cyan="#93a1a1",
        bright_white="#fdf6e3",
    ),
    "Builtin Solarized Light": Theme(
        name="Builtin Solarized Light",
        foreground="#657b83",
        background="#fdf6e3",
        cursor="#586e75",
        black="#073642",
        red="#dc322f",
        green="#859900",
        yellow="#b58900",
        blue="#268bd2",
        magenta="#d33682",
        cyan="#2aa198",
        white="#eee8d5",
        bright_black="#002b36",
        bright_red="#cb4b16",
        bright_green="#586e75",
        bright_yellow="#657b83",
        bright_blue="#839496",
        bright_magenta="#6c71c4",
        bright_cyan="#93a1a1",
        bright_white="#fdf6e3",
    ),
    "Builtin Tango Dark": Theme(
        name="Builtin Tango Dark",
        foreground="#ffffff",
        background="#000000",
        cursor="#ffffff",
        black="#000000",
        red="#cc0000",
        green="#4e9a06",
        yellow="#c4a000",
        blue="#3465a4",
        magenta="#75507b",
        cyan="#06989a",
        white="#d3d7cf",
        bright_black="#555753",
        bright_red="#ef2929",
        bright_green="#8ae234",
        bright_yellow="#fce94f",
        bright_blue="#729fcf",
        bright_magenta="#ad7fa8",
        bright_cyan="#34e2e2",
        bright_white="#eeeeec",
    ),
    "Builtin Tango Light": Theme(
        name="Builtin Tango Light",
        foreground="#000000",
        background="#ffffff",
        cursor="#000000",
        black="#000000",
        red="#cc0000",
        green="#4e9a06",
        yellow="#c4a000",
        blue="#3465a4",
        magenta="#75507b",
        cyan="#06989a",
        white="#d3d7cf",
        bright_black="#555753",
        bright_red="#ef2929",
        bright_green="#8ae234",
        bright_yellow="#fce94f",
        bright_blue="#729fcf",
        bright_magenta="#ad7fa8",
        bright_cyan="#34e2e2",
        bright_white="#eeeeec",
    ),
    "Campbell": Theme(
        name="Campbell",
        foreground="#cccccc",
        background="#0c0c0c",
        cursor="#ffffff",
        black="#0c0c0c",
        red="#c50f1f",
        green="#13a10e",
        yellow="#c19c00",
        blue="#0037da",
        magenta="#881798",
        cyan="#3a96dd",
        white="#cccccc",
        bright_black="#767676",
        bright_red="#e74856",
        bright_green="#16c60c",
        bright_yellow="#f9f1a5",
        bright_blue="#3b78ff",
        bright_magenta="#b4009e",
        bright_cyan="#61d6d6",
        bright_white="#f2f2f2",
    ),
    "Campbell Powershell": Theme(
        name="Campbell Powershell",
        foreground="#cccccc",
        background="#012456",
        cursor="#ffffff",
        black="#0c0c0c",
        red="#c50f1f",
        green="#13a10e",
        yellow="#c19c00",
        blue="#0037da",
        magenta="#881798",
        cyan="#3a96dd",
        white="#cccccc",
        bright_black="#767676",
        bright_red="#e74856",
        bright_green="#16c60c",
        bright_yellow="#f9f1a5",
        bright_blue="#3b78ff",
        bright_magenta="#b4009e",
        bright_cyan="#61d6d6",
        bright_white="#f2f2f2",
    ),
    "Catppuccin Frappe": Theme(
        name="Catppuccin Frappe",
        foreground="#c6d0f5",
        background="#303446",
        cursor="#f2d5cf",
        black="#51576d",
        red="#e78284",
        green="#a6d189",
        yellow="#e5c890",
        blue="#8caaee",
        magenta="#f4b8e4",
        cyan="#81c8be",
        white="#b5bfe2",
        bright_black="#626880",
        bright_red="#e78284",
        bright_green="#a6d189",
        bright_yellow="#e5c890",
        bright_blue="#8caaee",
        bright_magenta="#f4b8e4",
        bright_cyan="#81c8be",
        bright_white="#a5adce",
    ),
    "Catppuccin Latte": Theme(
        name="Catppuccin Latte",
        foreground="#4c4f69",
        background="#eff1f5",
        cursor="#dc8a78",
        black="#5c5f77",
        red="#d20f39",
        green="#40a02b",
        yellow="#df8e1d",
        blue="#1e66f5",
        magenta="#ea76cb",
        cyan="#179299",
        white="#acb0be",
        bright_black="#6c6f85",
        bright_red="#d20f39",
        bright_green="#40a02b",
        bright_yellow="#df8e1d",
        bright_blue="#1e66f5",
        bright_magenta="#ea76cb",
        bright_cyan="#179299",
        bright_white="#bcc0cc",
    ),
    "Catppuccin Macchiato": Theme(
        name="Catppuccin Macchiato",
        foreground="#cad3f5",
        background="#24273a",
        cursor="#f4dbd6",
        black="#494d64",
        red="#ed8796",
        green="#a6da95",
        yellow="#eed49f",
        blue="#8aadf4",
        magenta="#f5bde6",
        cyan="#8bd5ca",
        white="#b8c0e0",
        bright_black="#5b6078",
        bright_red="#ed8796",
        bright_green="#a6da95",
        bright_yellow="#eed49f",
        bright_blue="#8aadf4",
        bright_magenta="#f5bde6",
        bright_cyan="#8bd5ca",
        bright_white="#a5adcb",
    ),
    "Catppuccin Mocha": Theme(
        name="Catppuccin Mocha",
        foreground="#cdd6f4",
        background="#1e1e2e",
        cursor="#f5e0dc",
        black="#45475a",
        red="#f38ba8",
        green="#a6e3a1",
        yellow="#f9e2af",
        blue="#89b4fa",
        magenta="#f5c2e7",
        cyan="#94e2d5",
        white="#bac2de",
        bright_black="#585b70",
        bright_red="#f38ba8",
        bright_green="#a6e3a1",
        bright_yellow="#f9e2af",
        bright_blue="#89b4fa",
        bright_magenta="#f5c2e7",
        bright_cyan="#94e2d5",
        bright_white="#a6adc8",
    ),
    "Cobalt2": Theme(
        name="Cobalt2",
        foreground="#ffffff",
        background="#132738",
        cursor="#f0cc09",
        black="#000000",
        red="#ff0000",
        green="#38de21",
        yellow="#ffe50a",
        blue="#1460d2",
        magenta="#ff005d",
        cyan="#00bbbb",
        white="#bbbbbb",
        bright_black="#555555",
        bright_red="#f40e17",
        bright_green="#3bd01d",
        bright_yellow="#edc809",
        bright_blue="#5555ff",
        bright_magenta="#ff55ff",
        bright_cyan="#6ae3fa",
        bright_white="#ffffff",
    ),
    "Dracula": Theme(
        name="Dracula",
        foreground="#f8f8f2",
        background="#282a36",
        cursor="#f8f8f2",
        black="#21222c",
        red="#ff5555",
        green="#50fa7b",
        yellow="#f1fa8c",
        blue="#bd93f9",
        magenta="#ff79c6",
        cyan="#8be9fd",
        white="#f8f8f2",
        bright_black="#6272a4",
        bright_red="#ff6e6e",
        bright_green="#69ff94",
        bright_yellow="#ffffa5",
        bright_blue="#d6acff",
        bright_magenta="#ff92df",
        bright_cyan="#a4ffff",
        bright_white="#ffffff",
    ),
    "Gruvbox Dark": Theme(
        name="Gruvbox Dark",
        foreground="#ebdbb2",
        background="#282828",
        cursor="#ebdbb2",
        black="#282828",
        red="#cc241d",
        green="#98971a",
        yellow="#d79921",
        blue="#458588",
        magenta="#b16286",
        cyan="#689d6a",
        white="#a89984",
        bright_black="#928374",
        bright_red="#fb4934",
        bright_green="#b8bb26",
        bright_yellow="#fabd2f",
        bright_blue="#83a598",
        bright_magenta="#d3869b",
        bright_cyan="#8ec07c",
        bright_white="#ebdbb2",
    ),
    "Gruvbox Light": Theme(
        name="Gruvbox Light",
        foreground="#3c3836",
        background="#fbf1c7",
        cursor="#3c3836",
        black="#fbf1c7",
        red="#cc241d",
        green="#98971a",
        yellow="#d79921",
        blue="#458588",
        magenta="#b16286",
        cyan="#689d6a",
        white="#7c6f64",
        bright_black="#928374",
        bright_red="#9d0006",
        bright_green="#79740e",
        bright_yellow="#b57614",
        bright_blue="#076678",
        bright_magenta="#8f3f71",
        bright_cyan="#427b58",
        bright_white="#3c3836",
    ),
    "Homebrew": Theme(
        name="Homebrew",
        foreground="#00ff00",
        background="#000000",
        cursor="#23ff18",
        black="#000000",
        red="#990000",
        green="#00a600",
        yellow="#999900",
        blue="#0000b2",
        magenta="#b200b2",
        cyan="#00a6b2",
        white="#bfbfbf",
        bright_black="#666666",
        bright_red="#e50000",
        bright_green="#00d900",
        bright_yellow="#e5e500",
        bright_blue="#0000ff",
        bright_magenta="#e500e5",
        bright_cyan="#00e5e5",
        bright_white="#e5e5e5",
    ),
    "Kanagawa Wave": Theme(
        name="Kanagawa Wave",
        foreground="#dcd7ba",
        background="#1f1f28",
        cursor="#c8c093",
        black="#090618",
        red="#c34043",
        green="#76946a",
        yellow="#c0a36e",
        blue="#7e9cd8",
        magenta="#957fb8",
        cyan="#6a9589",
        white="#c8c093",
        bright_black="#727169",
        bright_red="#e82424",
        bright_green="#98bb6c",
        bright_yellow="#e6c384",
        bright_blue="#7fb4ca",
        bright_magenta="#938aa9",
        bright_cyan="#7aa89f",
        bright_white="#dcd7ba",
    ),
    "Man Page": Theme(
        name="Man Page",
        foreground="#000000",
        background="#fef49c",
        cursor="#7f7f7f",
        black="#000000",
        red="#cc0000",
        green="#00a600",
        yellow="#999900",
        blue="#0000b2",
        magenta="#b200b2",
        cyan="#00a6b2",
        white="#cccccc",
        bright_black="#666666",
        bright_red="#e50000",
        bright_green="#00d900",
        bright_yellow="#e5e500",
        bright_blue="#0000ff",
        bright_magenta="#e500e5",
        bright_cyan="#00e5e5",
        bright_white="#e5e5e5",
    ),
    "Monokai Remastered": Theme(
        name="Monokai Remastered",
        foreground="#d9d9d9",
        background="#0c0c0c",
        cursor="#fc971f",
        black="#1a1a1a",
        red="#f4005f",
        green="#98e024",
        yellow="#fd971f",
        blue="#9d65ff",
        magenta="#f4005f",
        cyan="#58d1eb",
        white="#c4c5b5",
        bright_black="#625e4c",
        bright_red="#f4005f",
        bright_green="#98e024",
        bright_yellow="#e0d561",
        bright_blue="#9d65ff",
        bright_magenta="#f4005f",
        bright_cyan="#58d1eb",
        bright_white="#f6f6ef",
    ),
    "Nord": Theme(
        name="Nord",
        foreground="#d8dee9",
        background="#2e3440",
        cursor="#eceff4",
        black="#3b4252",
        red="#bf616a",
        green="#a3be8c",
        yellow="#ebcb8b",
        blue="#81a1c1",
        magenta="#b48ead",
        cyan="#88c0d0",
        white="#e5e9f0",
        bright_black="#596377",
        bright_red="#bf616a",
        bright_green="#a3be8c",
        bright_yellow="#ebcb8b",
        bright_blue="#81a1c1",
        bright_magenta="#b48ead",
        bright_cyan="#8fbcbb",
        bright_white="#eceff4",
    ),
    "OneHalfDark": Theme(
        name="OneHalfDark",
        foreground="#dcdfe4",
        background="#282c34",
        cursor="#a3b3cc",
        black="#282c34",
        red="#e06c75",
        green="#98c379",
        yellow="#e5c07b",
        blue="#61afef",
        magenta="#c678dd",
        cyan="#56b6c2",
        white="#dcdfe4",
        bright_black="#5a6374",
        bright_red="#e06c75",
        bright_green="#98c379",
        bright_yellow="#e5c07b",
        bright_blue="#61afef",
        bright_magenta="#c678dd",
        bright_cyan="#56b6c2",
        bright_white="#dcdfe4",
    ),
    "OneHalfLight": Theme(
        name="OneHalfLight",
        foreground="#383a42",
        background="#fafafa",
        cursor="#bfceff",
        black="#383a42",
        red="#e45649",
        green="#50a14f",
        yellow="#c18401",
        blue="#0184bc",
        magenta="#a626a4",
        cyan="#0997b3",
        white="#fafafa",
        bright_black="#4f525e",
        bright_red="#e06c75",
        bright_green="#98c379",
        bright_yellow="#e5c07b",
        bright_blue="#61afef",
        bright_magenta="#c678dd",
        bright_cyan="#56b6c2",
        bright_white="#ffffff",
    ),
    "Tango Dark": Theme(
        name="Tango Dark",
        foreground="#d3d7cf",
        background="#000000",
        cursor="#ffffff",
        black="#000000",
        red="#cc0000",
        green="#4e9a06",
        yellow="#c4a000",
        blue="#3465a4",
        magenta="#75507b",
        cyan="#06989a",
        white="#d3d7cf",
        bright_black="#555753",
        bright_red="#ef2929",
        bright_green="#8ae234",
        bright_yellow="#fce94f",
        bright_blue="#729fcf",
        bright_magenta="#ad7fa8",
        bright_cyan="#34e2e2",
        bright_white="#eeeeec",
    ),
    "Tango Light": Theme(
        name="Tango Light",
        foreground="#555753",
        background="#ffffff",
        cursor="#000000",
        black="#000000",
        red="#cc0000",
        green="#4e9a06",
        yellow="#c4a000",
        blue="#3465a4",
        magenta="#75507b",
        cyan="#06989a",
        white="#d3d7cf",
        bright_black="#555753",
        bright_red="#ef2929",
        bright_green="#8ae234",
        bright_yellow="#fce94f",
        bright_blue="#729fcf",
        bright_magenta="#ad7fa8",
        bright_cyan="#34e2e2",
        bright_white="#eeeeec",
    ),
    "TokyoNight": Theme(
        name="TokyoNight",
        foreground="#c0caf5",
        background="#1a1b26",
        cursor="#c0caf5",
        black="#15161e",
        red="#f7768e",
        green="#9ece6a",
        yellow="#e0af68",
        blue="#7aa2f7",
        magenta="#bb9af7",
        cyan="#7dcfff",
        white="#a9b1d6",
        bright_black="#414868",
        bright_red="#f7768e",
        bright_green="#9ece6a",
        bright_yellow="#e0af68",
        bright_blue="#7aa2f7",
        bright_magenta="#bb9af7",
        bright_cyan="#7dcfff",
        bright_white="#c0caf5",
    ),
    "TokyoNight Storm": Theme(
        name="TokyoNight Storm",
        foreground="#c0caf5",
        background="#24283b",
        cursor="#c0caf5",
        black="#1d202f",
        red="#f7768e",
        green="#9ece6a",
        yellow="#e0af68",
        blue="#7aa2f7",
        magenta="#bb9af7",
        cyan="#7dcfff",
        white="#a9b1d6",
        bright_black="#414868",
        bright_red="#f7768e",
        bright_green="#9ece6a",
        bright_yellow="#e0af68",
        bright_blue="#7aa2f7",
        bright_magenta="#bb9af7",
        bright_cyan="#7dcfff",
        bright_white="#c0caf5",
    ),
    "Tomorrow Night": Theme(
        name="Tomorrow Night",
        foreground="#c5c8c6",
        background="#1d1f21",
        cursor="#c5c8c6",
        black="#000000",
        red="#cc6666",
        green="#b5bd68",
        yellow="#f0c674",
        blue="#81a2be",
        magenta="#b294bb",
        cyan="#8abeb7",
        white="#ffffff",
        bright_black="#000000",
        bright_red="#cc6666",
        bright_green="#b5bd68",
        bright_yellow="#f0c674",
        bright_blue="#81a2be",
        bright_magenta="#b294bb",
        bright_cyan="#8abeb7",
        bright_white="#ffffff",
    ),
    "Ubuntu": Theme(
        name="Ubuntu",
        foreground="#eeeeec",
        background="#300a24",
        cursor="#bbbbbb",
        black="#2e3436",
        red="#cc0000",
        green="#4e9a06",
        yellow="#c4a000",
        blue="#3465a4",
        magenta="#75507b",
        cyan="#06989a",
        white="#d3d7cf",
        bright_black="#555753",
        bright_red="#ef2929",
        bright_green="#8ae234",
        bright_yellow="#fce94f",
        bright_blue="#729fcf",
        bright_magenta="#ad7fa8",
        bright_cyan="#34e2e2",
        bright_white="#eeeeec",
    ),
    "Vintage": Theme(
        name="Vintage",
        foreground="#c0c0c0",
        background="#000000",
        cursor="#ffffff",
        black="#000000",
        red="#800000",
        green="#008000",
        yellow="#808000",
        blue="#000080",
        magenta="#800080",
        cyan="#008080",
        white="#c0c0c0",
        bright_black="#808080",
        bright_red="#ff0000",
        bright_green="#00ff00",
        bright_yellow="#ffff00",
        bright_blue="#0000ff",
        bright_magenta="#ff00ff",
        bright_cyan="#00ffff",
        bright_white="#ffffff",
    ),
    "Zenburn": Theme(
        name="Zenburn",
        foreground="#dcdccc",
        background="#3f3f3f",
        cursor="#73635a",
        black="#4d4d4d",
        red="#705050",
        green="#60b48a",
        yellow="#f0dfaf",
        blue="#506070",
        magenta="#dc8cc3",
        cyan="#8cd0d3",
        white="#dcdccc",
        bright_black="#709080",
        bright_red="#dca3a3",
        bright_green="#c3bf9f",
        bright_yellow="#e0cf9f",
        bright_blue="#94bff3",
        bright_magenta="#ec93d3",
        bright_cyan="#93e0e3",
        bright_white="#ffffff",
    ),
    "iTerm2 Solarized Dark": Theme(
        name="iTerm2 Solarized Dark",
        foreground="#839496",
        background="#002b36",
        cursor="#839496",
        black="#073642",
        red="#dc322f",
        green="#859900",
        yellow="#b58900",
        blue="#268bd2",
        magenta="#d33682",
        cyan="#2aa198",
        white="#eee8d5",
        bright_black="#335e69",
        bright_red="#cb4b16",
        bright_green="#586e75",
        bright_yellow="#657b83",
        bright_blue="#839496",
        bright_magenta="#6c71c4",
        bright_cyan="#93a1a1",
        bright_white="#fdf6e3",
    ),
    "iTerm2 Solarized Light": Theme(
        name="iTerm2 Solarized Light",
        foreground="#657b83",
        background="#fdf6e3",
        cursor="#657b83",
        black="#073642",
        red="#dc322f",
        green="#859900",
        yellow="#b58900",
        blue="#268bd2",
        magenta="#d33682",
        cyan="#2aa198",
        white="#bbb5a2",
        bright_black="#002b36",
        bright_red="#cb4b16",
        bright_green="#586e75",
        bright_yellow="#657b83",
        bright_blue="#839496",
        bright_magenta="#6c71c4",
        bright_cyan="#93a1a1",
        bright_white="#fdf6e3",
    ),
    "rose-pine": Theme(
        name="rose-pine",
        foreground="#e0def4",
        background="#191724",
        cursor="#e0def4",
        black="#26233a",
        red="#eb6f92",
        green="#31748f",
        yellow="#f6c177",
        blue="#9ccfd8",
        magenta="#c4a7e7",
        cyan="#ebbcba",
        white="#e0def4",
        bright_black="#6e6a86",
        bright_red="#eb6f92",
        bright_green="#31748f",
        bright_yellow="#f6c177",
        bright_blue="#9ccfd8",
        bright_magenta="#c4a7e7",
        bright_cyan="#ebbcba",
        bright_white="#e0def4",
    ),
}
