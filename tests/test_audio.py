import numpy as np
import pygame

from gridsnake.audio import EAT, GAME_OVER, SoundBoard, tone


class TestTone:

    def test_mono_int16_of_requested_length(self):
        samples = tone(440, 100, rate=10000)
        assert samples.dtype == np.int16
        assert samples.shape == (1000,)

    def test_stereo_duplicates_channel(self):
        samples = tone(440, 50, rate=10000, channels=2)
        assert samples.shape == (500, 2)
        assert np.array_equal(samples[:, 0], samples[:, 1])

    def test_fades_out_to_silence(self):
        samples = tone(300, 200, end_hz=100, rate=8000)
        assert samples[-1] == 0
        assert np.abs(samples).max() > 0


class TestSoundBoard:
    """Cues are fire-and-forget; failures never reach the caller."""

    def test_plays_known_cue(self, fake_sound):
        played = []
        board = SoundBoard({EAT: fake_sound(EAT, played)})
        board.play(EAT)
        assert played == [EAT]

    def test_unknown_cue_is_a_no_op(self):
        SoundBoard().play(GAME_OVER)

    def test_playback_error_is_swallowed(self, caplog, fake_sound):
        board = SoundBoard({GAME_OVER: fake_sound(GAME_OVER, [], fail=True)})
        board.play(GAME_OVER)
        assert "could not play" in caplog.text

    def test_muted_board_has_no_sounds(self):
        assert SoundBoard.load(enabled=False).sounds == {}

    def test_missing_mixer_disables_sound(self, monkeypatch, caplog):
        def no_device(*args, **kwargs):
            raise pygame.error("No available audio device")

        monkeypatch.setattr(pygame.mixer, "get_init", lambda: None)
        monkeypatch.setattr(pygame.mixer, "init", no_device)
        board = SoundBoard.load(enabled=True)
        assert board.sounds == {}
        assert "sound disabled" in caplog.text
        board.play(EAT)
