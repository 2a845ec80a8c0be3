"""pyglet window: frame clock, keyboard routing and drawing."""

import logging

import pyglet

import config
from config import FPS, SCREEN_H, SCREEN_W
from audio import PygletAudio
from controller import GameController
from controls import InputState
from storage import PersistenceStore
from visuals import Visuals

LOG = logging.getLogger(__name__)


class Game(pyglet.window.Window):
    """Main game window."""

    def __init__(self):
        super().__init__(width=SCREEN_W, height=SCREEN_H, caption="ASTEROIDS", vsync=True)
        self.input = InputState()
        self.audio = PygletAudio()
        self.visuals = Visuals(self.width, self.height)
        self.controller = GameController(
            self.width,
            self.height,
            input_state=self.input,
            audio=self.audio,
            store=PersistenceStore(config.SAVE_FILE),
            renderer=self.visuals,
        )
        self.audio.load()
        pyglet.clock.schedule_interval(self.update, 1.0 / FPS)

    def on_key_press(self, symbol, modifiers):
        self.input.press_key(pyglet.window.key.symbol_string(symbol))
        # Keep ESC from closing the window; the states handle it.
        if symbol == pyglet.window.key.ESCAPE:
            return pyglet.event.EVENT_HANDLED

    def on_key_release(self, symbol, modifiers):
        self.input.release_key(pyglet.window.key.symbol_string(symbol))

    def on_text(self, text):
        self.input.push_text(text)

    def on_deactivate(self):
        # Keys released while unfocused never arrive.
        self.input.release_all()

    def on_resize(self, width, height):
        super().on_resize(width, height)
        # Fired once during window creation, before the controller exists.
        if getattr(self, "controller", None):
            self.controller.resize(width, height)

    def update(self, dt: float):
        """Advance one frame. Errors are logged so the clock keeps running."""
        try:
            self.controller.update(dt)
        except Exception:
            LOG.exception("Frame update failed")

    def on_draw(self):
        """Render the game."""
        self.clear()
        try:
            self.controller.draw()
        except Exception:
            LOG.exception("Frame draw failed")

    def on_close(self):
        self.audio.stop_all()
        pyglet.clock.unschedule(self.update)
        super().on_close()


def main():
    """Start the game."""
    try:
        _ = Game()
        pyglet.app.run()
    except KeyboardInterrupt:
        pass
    except Exception:
        LOG.exception("Fatal error")
        raise


if __name__ == "__main__":
    main()
