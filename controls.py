"""Keyboard action state: held actions, single-press actions and typed text."""

from __future__ import annotations

# pyglet key symbol names -> actions. One key can drive several actions
# (UP both thrusts and moves a menu cursor).
KEY_ACTIONS: dict[str, tuple[str, ...]] = {
    "UP": ("thrust", "menu_up"),
    "W": ("thrust", "menu_up"),
    "LEFT": ("rotate_left",),
    "A": ("rotate_left",),
    "RIGHT": ("rotate_right",),
    "D": ("rotate_right",),
    "DOWN": ("menu_down",),
    "S": ("menu_down",),
    "SPACE": ("fire", "menu_select"),
    "H": ("hyperspace",),
    "P": ("pause",),
    "RETURN": ("enter", "menu_select"),
    "ENTER": ("enter", "menu_select"),
    "ESCAPE": ("escape",),
    "M": ("toggle_mute",),
    "BACKSPACE": ("backspace",),
}

SINGLE_PRESS_ACTIONS = frozenset({
    "hyperspace",
    "pause",
    "enter",
    "escape",
    "toggle_mute",
    "menu_up",
    "menu_down",
    "menu_select",
    "backspace",
})


class InputState:
    """Action-level input.

    Held actions are queried with is_pressed(). Single-press actions latch on
    key down and are cleared by the first consume() that reads them.
    """

    def __init__(self) -> None:
        self._held: set[str] = set()
        self._pressed: set[str] = set()
        self._text: list[str] = []

    def press(self, action: str) -> None:
        if action in SINGLE_PRESS_ACTIONS:
            if action not in self._held:
                self._pressed.add(action)
        self._held.add(action)

    def release(self, action: str) -> None:
        self._held.discard(action)

    def press_key(self, key_name: str) -> None:
        for action in KEY_ACTIONS.get(key_name, ()):
            self.press(action)

    def release_key(self, key_name: str) -> None:
        for action in KEY_ACTIONS.get(key_name, ()):
            self.release(action)

    def is_pressed(self, action: str) -> bool:
        return action in self._held

    def consume(self, action: str) -> bool:
        if action in self._pressed:
            self._pressed.discard(action)
            return True
        return False

    def push_text(self, text: str) -> None:
        self._text.append(text)

    def take_text(self) -> str:
        text = "".join(self._text)
        self._text.clear()
        return text

    def clear_pressed(self) -> None:
        """Drop latched presses and typed text (held keys stay held)."""
        self._pressed.clear()
        self._text.clear()

    def release_all(self) -> None:
        self._held.clear()
        self.clear_pressed()
