"""PNG dope-sheet preview provider."""

import hashlib
from dataclasses import dataclass
from io import BytesIO

from PIL import Image, ImageDraw, ImageFont

from ..timeline.curve import Curve
from ..timeline.timeline import Timeline
from .base import OutputProvider

Color = tuple[int, int, int]


@dataclass(frozen=True)
class DopeSheetStyle:
    """Layout and colors for the dope-sheet preview."""
    background_color: Color
    text_color: Color
    grid_color: Color
    value_color: Color
    row_height: int = 18
    label_width: int = 260
    pixels_per_second: int = 120
    padding: int = 8

    @classmethod
    def darkmode(cls) -> "DopeSheetStyle":
        return cls(
            background_color=(13, 17, 23),
            text_color=(230, 237, 243),
            grid_color=(48, 54, 61),
            value_color=(57, 211, 83),
        )


class PngOutputProvider(OutputProvider):
    """Output provider rendering each timeline as a step-chart image."""

    extension = ".png"

    def __init__(self, location: str = "", style: DopeSheetStyle | None = None):
        super().__init__(location)
        self.style = style or DopeSheetStyle.darkmode()

    def encode(self, timeline: Timeline) -> bytes:
        image = self.render(timeline)
        buffer = BytesIO()
        image.save(buffer, format="png", optimize=True)
        return buffer.getvalue()

    def render(self, timeline: Timeline) -> Image.Image:
        """Draw one row per binding; each key fills until the next key."""
        style = self.style
        duration = max(timeline.duration, 1.0 / timeline.frame_rate)
        track_width = max(1, round(duration * style.pixels_per_second))
        rows = list(timeline.items())

        width = style.label_width + track_width + 2 * style.padding
        height = (len(rows) + 1) * style.row_height + 2 * style.padding
        image = Image.new("RGB", (width, height), style.background_color)
        draw = ImageDraw.Draw(image)
        font = ImageFont.load_default()

        draw.text(
            (style.padding, style.padding),
            f"{timeline.name} ({duration:.2f}s @ {timeline.frame_rate:g} Hz)",
            font=font,
            fill=style.text_color,
        )
        track_x = style.padding + style.label_width
        for row, (binding, curve) in enumerate(rows, start=1):
            top = style.padding + row * style.row_height
            draw.line(
                [(style.padding, top), (width - style.padding, top)],
                fill=style.grid_color,
            )
            draw.text((style.padding, top + 2), str(binding), font=font, fill=style.text_color)
            self._draw_curve(draw, curve, track_x, top, track_width, duration)

        return image

    def _draw_curve(
        self,
        draw: ImageDraw.ImageDraw,
        curve: Curve,
        left: int,
        top: int,
        track_width: int,
        duration: float,
    ) -> None:
        style = self.style
        keys = curve.keys
        for index, key in enumerate(keys):
            end_time = keys[index + 1].time if index + 1 < len(keys) else duration
            x0 = left + round(key.time / duration * track_width)
            x1 = max(x0 + 1, left + round(end_time / duration * track_width))
            draw.rectangle(
                [(x0, top + 3), (x1 - 1, top + style.row_height - 3)],
                fill=self._value_color(key.value),
            )

    def _value_color(self, value: float | str) -> Color:
        if isinstance(value, str):
            digest = hashlib.sha256(value.encode("utf-8")).digest()
            return (64 + digest[0] % 192, 64 + digest[1] % 192, 64 + digest[2] % 192)
        # Objects are 0/1, blend weights 0-100
        level = min(max(value if value <= 1.0 else value / 100.0, 0.0), 1.0)
        background = self.style.grid_color
        return tuple(
            round(base + (target - base) * level)
            for base, target in zip(background, self.style.value_color)
        )
