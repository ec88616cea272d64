"""Tests for episode tags and range collapsing."""

import pytest

from whatsontv.core.types import Show
from whatsontv.utilities.episodes import (
    format_episode_info,
    format_episode_ranges,
    parse_episode_ranges,
)


def _make_episode(season: int, number: int) -> Show:
    return Show(id=1, name="Test Show", season=season, number=number)


class TestFormatEpisodeInfo:
    """format_episode_info renders single SxxEyy tags."""

    def test_padded(self):
        assert format_episode_info(_make_episode(1, 5)) == "S01E05"

    def test_unpadded(self):
        assert format_episode_info(_make_episode(1, 5), pad=False) == "S1E5"

    def test_unknown_season(self):
        assert format_episode_info(_make_episode(0, 5)) == "E05"

    def test_unknown_both(self):
        assert format_episode_info(_make_episode(0, 0)) == ""

    def test_none(self):
        assert format_episode_info(None) == ""


class TestFormatEpisodeRanges:
    """Consecutive episodes collapse, gaps are listed separately."""

    def test_run_and_gap(self):
        episodes = [_make_episode(1, n) for n in (1, 2, 3, 5)]
        assert format_episode_ranges(episodes) == "S1E1-3, S1E5"

    def test_unsorted_input(self):
        episodes = [_make_episode(1, n) for n in (5, 3, 1, 2)]
        assert format_episode_ranges(episodes) == "S1E1-3, S1E5"

    def test_single_episode(self):
        assert format_episode_ranges([_make_episode(2, 7)]) == "S2E7"

    def test_empty(self):
        assert format_episode_ranges([]) == ""

    def test_multiple_seasons(self):
        pairs = [(2, 1), (1, 9), (1, 10), (2, 2)]
        assert format_episode_ranges(pairs) == "S1E9-10, S2E1-2"

    def test_run_does_not_cross_seasons(self):
        assert format_episode_ranges([(1, 10), (2, 11)]) == "S1E10, S2E11"

    def test_duplicates_collapse(self):
        assert format_episode_ranges([(1, 1), (1, 1), (1, 2)]) == "S1E1-2"

    def test_padded(self):
        episodes = [_make_episode(1, n) for n in (1, 2, 3, 5)]
        assert format_episode_ranges(episodes, pad=True) == "S01E01-03, S01E05"


class TestParseEpisodeRanges:
    """parse_episode_ranges expands range text back to pairs."""

    def test_unpadded(self):
        assert parse_episode_ranges("S1E1-3, S1E5") == [(1, 1), (1, 2), (1, 3), (1, 5)]

    def test_padded(self):
        assert parse_episode_ranges("S01E01-03, S01E05") == [(1, 1), (1, 2), (1, 3), (1, 5)]

    def test_empty(self):
        assert parse_episode_ranges("") == []

    def test_invalid_token(self):
        with pytest.raises(ValueError):
            parse_episode_ranges("S1E1, episode two")

    def test_descending_range(self):
        with pytest.raises(ValueError):
            parse_episode_ranges("S1E5-3")

    @pytest.mark.parametrize(
        "pairs",
        [
            [(1, 1), (1, 2), (1, 3), (1, 5)],
            [(1, 9), (1, 10), (2, 1), (3, 4), (3, 5)],
            [(4, 12)],
        ],
    )
    def test_round_trip(self, pairs):
        for pad in (True, False):
            assert parse_episode_ranges(format_episode_ranges(pairs, pad=pad)) == pairs
