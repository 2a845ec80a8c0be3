"""
Screen flow: one State per screen, keyed by class name.
"""

import logging

LOG = logging.getLogger(__name__)


class State:
    """One screen of the game (menu, playing, paused, ...)."""
    # States that read typed text opt out of global hotkeys.
    captures_text = False

    def __init__(self, game):
        self.game = game

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def enter(self):
        """Called on the transition into this screen."""
        pass

    def exit(self):
        """Called before another screen takes over."""
        pass

    def update(self, dt: float):
        """Advance this screen by dt seconds."""
        pass

    def draw(self):
        """Render the screen for this state."""
        pass


class StateMachine:
    """Holds the screens and the active one."""
    def __init__(self, initial_state: State = None):
        self.current_state = None
        self._states = {}
        if initial_state:
            self.add_state(initial_state)
            self.set_state(initial_state.__class__.__name__)

    def add_state(self, state: State):
        """Adds a state to the machine."""
        self._states[state.__class__.__name__] = state

    def get_state(self, state_name: str) -> State:
        return self._states[state_name]

    @property
    def current_name(self):
        return self.current_state.name if self.current_state else None

    def set_state(self, state_name: str):
        """Transitions to a new state."""
        new_state = self._states.get(state_name)
        if new_state is None:
            raise ValueError(f"State '{state_name}' not found.")

        if self.current_state:
            self.current_state.exit()
        LOG.debug("State %s -> %s", self.current_name, state_name)
        self.current_state = new_state
        self.current_state.enter()

    def update(self, dt: float):
        if self.current_state:
            self.current_state.update(dt)

    def draw(self):
        if self.current_state:
            self.current_state.draw()
