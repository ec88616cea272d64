"""Tests for grouping and time sorting."""

from whatsontv.consumers.grouping import (
    group_shows_by_network,
    group_shows_by_show_id,
    sort_episodes_by_number,
    sort_shows_by_time,
)
from whatsontv.core.types import Show


def _make_show(id: int = 1, airtime: str = "", network: str = "CBS", season: int = 1, number: int = 1) -> Show:
    return Show(id=id, name=f"Show {id}", airtime=airtime, network=network, season=season, number=number)


class TestSortShowsByTime:
    """Timed shows ascending, then untimed in input order."""

    def test_timed_before_untimed(self):
        shows = [_make_show(1, "21:00"), _make_show(2, ""), _make_show(3, "20:00")]
        assert [s.airtime for s in sort_shows_by_time(shows)] == ["20:00", "21:00", ""]

    def test_stable_for_equal_times(self):
        shows = [_make_show(1, "20:00"), _make_show(2, "19:00"), _make_show(3, "20:00")]
        assert [s.id for s in sort_shows_by_time(shows)] == [2, 1, 3]

    def test_untimed_keep_relative_order(self):
        shows = [_make_show(5, ""), _make_show(1, "08:00"), _make_show(3, ""), _make_show(4, "")]
        assert [s.id for s in sort_shows_by_time(shows)] == [1, 5, 3, 4]

    def test_returns_new_list(self):
        shows = [_make_show(1, "21:00"), _make_show(2, "20:00")]
        result = sort_shows_by_time(shows)
        assert result is not shows
        assert [s.id for s in shows] == [1, 2]

    def test_empty(self):
        assert sort_shows_by_time([]) == []


class TestGroupShowsByNetwork:
    """Buckets keep first-seen network order and input order within."""

    def test_first_seen_order(self):
        shows = [
            _make_show(1, network="NBC"),
            _make_show(2, network="ABC"),
            _make_show(3, network="NBC"),
        ]
        groups = group_shows_by_network(shows)
        assert list(groups) == ["NBC", "ABC"]
        assert [s.id for s in groups["NBC"]] == [1, 3]

    def test_suffix_is_separate_bucket(self):
        shows = [_make_show(1, network="BBC One"), _make_show(2, network="BBC One (GB)")]
        assert list(group_shows_by_network(shows)) == ["BBC One", "BBC One (GB)"]

    def test_empty(self):
        assert group_shows_by_network([]) == {}


class TestShowIdGrouping:
    """Episode grouping within a network."""

    def test_group_by_show_id(self):
        shows = [_make_show(2, number=1), _make_show(1, number=1), _make_show(2, number=2)]
        groups = group_shows_by_show_id(shows)
        assert list(groups) == [2, 1]
        assert [s.number for s in groups[2]] == [1, 2]

    def test_sort_episodes_by_number(self):
        shows = [_make_show(1, season=2, number=1), _make_show(1, season=1, number=3), _make_show(1, season=1, number=2)]
        assert [(s.season, s.number) for s in sort_episodes_by_number(shows)] == [(1, 2), (1, 3), (2, 1)]
