"""Sound effects: a silent sink contract and the pyglet.media implementation."""

import logging
import os

import pyglet

import config

LOG = logging.getLogger(__name__)

SOUND_FILES: dict[str, str] = {
    "player_shoot": "player_shoot.wav",
    "player_explode": "player_explode.wav",
    "thrust": "player_thrust.wav",
    "asteroid_explode_large": "asteroid_explode_large.wav",
    "asteroid_explode_medium": "asteroid_explode_medium.wav",
    "asteroid_explode_small": "asteroid_explode_small.wav",
    "saucer_hum": "saucer_hum.wav",
    "saucer_shoot": "saucer_shoot.wav",
    "saucer_explode": "saucer_explode.wav",
    "extra_life": "extra_life.wav",
    "hyperspace": "hyperspace.wav",
}


class AudioSink:
    """Audio contract. This base class plays nothing."""

    def __init__(self) -> None:
        self.muted = False

    def play(self, name: str) -> None:
        pass

    def start_loop(self, name: str) -> None:
        pass

    def stop_loop(self, name: str) -> None:
        pass

    def stop_all(self) -> None:
        pass

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.muted:
            self.stop_all()
        LOG.info("Audio %s", "muted" if self.muted else "unmuted")
        return self.muted


class PygletAudio(AudioSink):
    """pyglet.media backed sounds.

    Files are decoded one per clock tick after load() is called. Until a
    sound is ready (or if it failed) requests for it are silently ignored.
    """

    def __init__(self, audio_dir: str = config.AUDIO_DIR, files: dict[str, str] = SOUND_FILES):
        super().__init__()
        self.audio_dir = audio_dir
        self.files = dict(files)
        self.sounds: dict[str, object] = {}
        self.ready: dict[str, bool] = {name: False for name in self.files}
        self._loops: dict[str, pyglet.media.Player] = {}
        self._pending: list[str] = []

    def load(self) -> None:
        """Queue every sound file present in audio_dir for decoding."""
        if not os.path.isdir(self.audio_dir):
            LOG.warning("Audio directory %s not found; playing without sound", self.audio_dir)
            self._pending = []
            return
        self._pending = []
        for name, filename in self.files.items():
            if os.path.isfile(os.path.join(self.audio_dir, filename)):
                self._pending.append(name)
            else:
                LOG.debug("Sound file %s not supplied", filename)
        pyglet.clock.schedule_once(self._load_next, 0)

    def _load_next(self, dt: float) -> None:
        if not self._pending:
            LOG.info("Sound loading complete (%d/%d ready)", sum(self.ready.values()), len(self.files))
            return
        name = self._pending.pop(0)
        path = os.path.join(self.audio_dir, self.files[name])
        try:
            self.sounds[name] = pyglet.media.load(path, streaming=False)
            self.ready[name] = True
            LOG.debug("Loaded sound %s", name)
        except (FileNotFoundError, pyglet.media.MediaException, OSError) as exc:
            LOG.warning("Could not load sound %s from %s: %s", name, path, exc)
            self.sounds[name] = None
        pyglet.clock.schedule_once(self._load_next, 0)

    def _source(self, name: str):
        if self.muted or not self.ready.get(name):
            return None
        return self.sounds.get(name)

    def play(self, name: str) -> None:
        source = self._source(name)
        if source is None:
            return
        try:
            source.play()
        except pyglet.media.MediaException as exc:
            LOG.debug("Playback of %s failed: %s", name, exc)

    def start_loop(self, name: str) -> None:
        if name in self._loops:
            return
        source = self._source(name)
        if source is None:
            return
        try:
            player = pyglet.media.Player()
            player.queue(source)
            player.loop = True
            player.play()
        except pyglet.media.MediaException as exc:
            LOG.debug("Loop %s failed: %s", name, exc)
            return
        self._loops[name] = player

    def stop_loop(self, name: str) -> None:
        player = self._loops.pop(name, None)
        if player is not None:
            player.pause()
            player.delete()

    def stop_all(self) -> None:
        for name in list(self._loops):
            self.stop_loop(name)
