"""PNG swatch sheets for reviewing regenerated themes."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from termthemes.models import Theme


class SwatchRenderer:
    """Draws a theme's background, text, cursor and 16 ANSI colors."""

    def __init__(self, cell: int = 48, padding: int = 12) -> None:
        self.cell = max(16, cell)
        self.padding = max(0, padding)

    @property
    def size(self) -> tuple[int, int]:
        width = self.padding * 2 + self.cell * 8
        height = self.padding * 4 + self.cell * 3
        return width, height

    def render_image(self, theme: Theme) -> Image.Image:
        image = Image.new("RGB", self.size, theme.background)
        draw = ImageDraw.Draw(image)
        self._draw_header(draw, theme)
        self._draw_palette(draw, theme)
        return image

    def save(self, theme: Theme, path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render_image(theme).save(path, format="PNG")
        return path

    def _font(self, size: int):
        try:
            return ImageFont.truetype("DejaVuSansMono.ttf", size)
        except OSError:
            return ImageFont.load_default()

    def _draw_header(self, draw: ImageDraw.ImageDraw, theme: Theme) -> None:
        pad, cell = self.padding, self.cell
        font = self._font(max(10, cell // 3))
        draw.text((pad, pad + cell // 4), theme.name, fill=theme.foreground, font=font)
        # Block cursor at the right edge of the header row.
        x0 = pad + cell * 8 - cell // 3
        draw.rectangle([x0, pad + cell // 4, x0 + cell // 4, pad + cell * 3 // 4], fill=theme.cursor)

    def _draw_palette(self, draw: ImageDraw.ImageDraw, theme: Theme) -> None:
        pad, cell = self.padding, self.cell
        font = self._font(max(8, cell // 4))
        for index, color in enumerate(theme.ansi_colors()):
            row, col = divmod(index, 8)
            x0 = pad + col * cell
            y0 = pad * (2 + row) + cell * (1 + row)
            draw.rectangle([x0, y0, x0 + cell - 1, y0 + cell - 1], fill=color)
            draw.text((x0 + 3, y0 + 2), str(index), fill=theme.background, font=font)


def render_swatch(theme: Theme, path: Path, cell: int = 48) -> Path:
    return SwatchRenderer(cell=cell).save(theme, path)
