"""Keyboard-navigated option lists used by the menu, pause and pilot screens."""

from typing import Optional, Sequence


class OptionMenu:
    """A vertical list of option labels with a wrapping cursor."""

    def __init__(self, options: Sequence[str] = ()):
        self.options: list[str] = list(options)
        self.index: int = 0

    def set_options(self, options: Sequence[str]) -> None:
        """Replace the labels, keeping the cursor inside the new list."""
        self.options = list(options)
        self._clamp()

    def _clamp(self) -> None:
        if not self.options:
            self.index = 0
        elif self.index >= len(self.options) or self.index < 0:
            self.index = max(0, min(self.index, len(self.options) - 1))

    def move(self, delta: int) -> None:
        if not self.options:
            return
        self.index = (self.index + delta) % len(self.options)

    def reset(self) -> None:
        self.index = 0

    @property
    def selected(self) -> Optional[str]:
        self._clamp()
        if not self.options:
            return None
        return self.options[self.index]

    def handle_navigation(self, input_state) -> None:
        """Apply menu_up / menu_down presses."""
        if input_state.consume("menu_up"):
            self.move(-1)
        if input_state.consume("menu_down"):
            self.move(1)
