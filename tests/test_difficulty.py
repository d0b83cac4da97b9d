"""Tests for difficulty presets and the speed curve."""

import pytest

from grid_snake.difficulty import (
    DEFAULT_DIFFICULTY,
    DIFFICULTY_PROFILES,
    Difficulty,
    DifficultyProfile,
    next_tick_ms,
    parse_difficulty,
)


class TestDifficultyTable:
    def test_all_difficulties_have_profiles(self):
        assert set(DIFFICULTY_PROFILES) == set(Difficulty)

    def test_normal_profile(self):
        p = DIFFICULTY_PROFILES[Difficulty.NORMAL]
        assert p.initial_tick_ms == 160
        assert p.speedup_food_interval == 4
        assert p.speedup_factor == 0.92
        assert p.min_tick_ms == 60

    def test_harder_is_faster(self):
        starts = [DIFFICULTY_PROFILES[d].initial_tick_ms for d in Difficulty]
        assert starts == sorted(starts, reverse=True)

    def test_invalid_profile(self):
        with pytest.raises(ValueError, match="min_tick_ms"):
            DifficultyProfile(50, 4, 0.9, 60)
        with pytest.raises(ValueError, match="speedup_factor"):
            DifficultyProfile(160, 4, 1.5, 60)
        with pytest.raises(ValueError, match="speedup_food_interval"):
            DifficultyProfile(160, 0, 0.9, 60)


class TestParseDifficulty:
    def test_known_keys(self):
        assert parse_difficulty("hard") == Difficulty.HARD
        assert parse_difficulty(" INSANE ") == Difficulty.INSANE
        assert parse_difficulty(Difficulty.EASY) == Difficulty.EASY

    def test_unknown_falls_back_to_normal(self):
        assert DEFAULT_DIFFICULTY == Difficulty.NORMAL
        assert parse_difficulty("nightmare") == Difficulty.NORMAL
        assert parse_difficulty("") == Difficulty.NORMAL
        assert parse_difficulty(None) == Difficulty.NORMAL


class TestSpeedCurve:
    profile = DIFFICULTY_PROFILES[Difficulty.NORMAL]

    def test_no_change_at_zero(self):
        assert next_tick_ms(self.profile, 0, 160) == 160

    def test_no_change_off_interval(self):
        for score in (1, 2, 3, 5, 7):
            assert next_tick_ms(self.profile, score, 160) == 160

    def test_speeds_up_on_interval(self):
        assert next_tick_ms(self.profile, 4, 160) == 147
        assert next_tick_ms(self.profile, 8, 147) == 135

    def test_floor(self):
        assert next_tick_ms(self.profile, 4, 61) == 60
        assert next_tick_ms(self.profile, 4, 60) == 60

    def test_monotonic_and_bounded(self):
        for difficulty, profile in DIFFICULTY_PROFILES.items():
            tick = profile.initial_tick_ms
            for score in range(1, 400):
                new = next_tick_ms(profile, score, tick)
                assert new <= tick, difficulty
                assert new >= profile.min_tick_ms, difficulty
                tick = new
            assert tick == profile.min_tick_ms
