"""Sound loading with missing assets, and the silent sink."""

from audio import SOUND_FILES, AudioSink, PygletAudio


def test_missing_audio_dir_loads_nothing(tmp_path):
    audio = PygletAudio(audio_dir=str(tmp_path / "nope"))

    audio.load()

    assert audio._pending == []
    assert not any(audio.ready.values())
    audio.play("player_shoot")
    audio.start_loop("thrust")
    audio.stop_all()


def test_only_supplied_files_are_queued(tmp_path):
    (tmp_path / SOUND_FILES["hyperspace"]).write_bytes(b"")
    audio = PygletAudio(audio_dir=str(tmp_path))

    audio.load()

    assert audio._pending == ["hyperspace"]


def test_mute_toggle():
    sink = AudioSink()
    assert sink.toggle_mute() is True
    assert sink.toggle_mute() is False
