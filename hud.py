"""HUD and text screens drawn with pyglet labels."""

from __future__ import annotations

import pyglet
from pyglet import shapes

from config import PALETTE

UI_FONT_SIZE = 14
TITLE_FONT_SIZE = 32


def _rgba(key: str, alpha: int = 255) -> tuple[int, int, int, int]:
    r, g, b = PALETTE.get(key, PALETTE["menu_text"])
    return (r, g, b, alpha)


class HUD:
    """Score, level, lives, pilot and mute indicator during play."""

    def __init__(self, width: int, height: int):
        self.batch = pyglet.graphics.Batch()
        self._last: dict[str, str] = {}

        def make_label(anchor_x: str, anchor_y: str, size: int = UI_FONT_SIZE, color: str = "hud_text"):
            return pyglet.text.Label(
                "",
                font_size=size,
                x=0,
                y=0,
                anchor_x=anchor_x,
                anchor_y=anchor_y,
                color=_rgba(color),
                batch=self.batch,
            )

        self.elements = {
            "score": make_label("left", "top", 16),
            "level": make_label("center", "top", 16),
            "lives": make_label("right", "top", 16),
            "pilot": make_label("left", "bottom", 11, "locked"),
            "status": make_label("right", "bottom", 11, "locked"),
        }
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        pad = 12
        positions = {
            "score": (pad, height - pad),
            "level": (width // 2, height - pad),
            "lives": (width - pad, height - pad),
            "pilot": (pad, pad),
            "status": (width - pad, pad),
        }
        for key, (x, y) in positions.items():
            self.elements[key].x = x
            self.elements[key].y = y

    def _set(self, key: str, text: str) -> None:
        # Relayout only on change.
        if self._last.get(key) != text:
            self._last[key] = text
            self.elements[key].text = text

    def update(self, state, user: str | None, muted: bool) -> None:
        self._set("score", f"SCORE {state.score:,}")
        self._set("level", f"LEVEL {state.level}")
        self._set("lives", f"LIVES {state.lives}")
        self._set("pilot", f"PILOT {user or '-'}  [{state.difficulty.name}]")
        status = []
        if state.ship is None and state.lives > 0:
            status.append("GET READY")
        if muted:
            status.append("MUTED")
        self._set("status", "  ".join(status))

    def draw(self) -> None:
        self.batch.draw()


class TextScreen:
    """Title plus a column of lines, reusing a pool of labels between frames."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.batch = pyglet.graphics.Batch()
        self.overlay = shapes.Rectangle(0, 0, width, height, color=PALETTE["background"], batch=self.batch)
        self.overlay.opacity = 0
        self.title = pyglet.text.Label(
            "",
            font_size=TITLE_FONT_SIZE,
            x=width // 2,
            y=height - 110,
            anchor_x="center",
            anchor_y="center",
            color=_rgba("menu_text"),
            batch=self.batch,
        )
        self.footer = pyglet.text.Label(
            "",
            font_size=11,
            x=width // 2,
            y=40,
            anchor_x="center",
            anchor_y="center",
            color=_rgba("locked"),
            batch=self.batch,
        )
        self._lines: list[pyglet.text.Label] = []

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.overlay.width = width
        self.overlay.height = height
        self.title.x = width // 2
        self.title.y = height - 110
        self.footer.x = width // 2

    def _line(self, i: int) -> pyglet.text.Label:
        while len(self._lines) <= i:
            self._lines.append(
                pyglet.text.Label(
                    "",
                    font_size=UI_FONT_SIZE,
                    x=0,
                    y=0,
                    anchor_x="center",
                    anchor_y="center",
                    color=_rgba("menu_text"),
                    batch=self.batch,
                )
            )
        return self._lines[i]

    def show(self, title: str, rows: list[tuple[str, str]], footer: str = "",
             overlay: bool = False, spacing: int = 30, top: int | None = None) -> None:
        self.overlay.opacity = 170 if overlay else 0
        if self.title.text != title:
            self.title.text = title
        if self.footer.text != footer:
            self.footer.text = footer

        if top is None:
            top = self.height - 190
        for i, (text, color_key) in enumerate(rows):
            label = self._line(i)
            if label.text != text:
                label.text = text
            label.color = _rgba(color_key)
            label.x = self.width // 2
            label.y = top - i * spacing
        for label in self._lines[len(rows):]:
            if label.text:
                label.text = ""

    def draw(self) -> None:
        self.batch.draw()


class NotificationBanner:
    """Achievement unlock banners stacked near the bottom of the screen."""

    def __init__(self, width: int, height: int):
        self.screen = TextScreen(width, height)

    def resize(self, width: int, height: int) -> None:
        self.screen.resize(width, height)

    def draw(self, achievements) -> None:
        if not achievements:
            return
        rows = [(f"Achievement unlocked: {a.name}", "notification") for a in achievements]
        # Stack upwards from the bottom edge.
        self.screen.show("", rows, spacing=24, top=80 + (len(rows) - 1) * 24)
        self.screen.draw()
