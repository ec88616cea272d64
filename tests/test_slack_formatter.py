"""Tests for the Slack Block Kit formatter."""

import pytest

from whatsontv.core.types import Show
from whatsontv.formatters.slack import SlackShowFormatter, get_type_emoji


def _make_show(
    id: int = 1,
    name: str = "Survivor",
    type: str = "Reality",
    network: str = "CBS",
    airtime: str = "20:00",
    season: int = 46,
    number: int = 3,
) -> Show:
    return Show(id=id, name=name, type=type, network=network, airtime=airtime, season=season, number=number)


def _text(block: dict) -> str:
    return block["text"]["text"]


@pytest.fixture
def formatter():
    return SlackShowFormatter()


class TestTypeEmoji:
    """Show type to emoji mapping."""

    @pytest.mark.parametrize(
        "show_type,emoji",
        [
            ("Scripted", "📝"),
            ("reality", "👁"),
            ("Talk Show", "📺"),
            ("talk", "🎙"),
            ("Documentary", "🎬"),
            ("Variety", "🎭"),
            ("Game", "🎮"),
            ("News", "📰"),
            ("Sports", "⚽"),
            ("Unknown Type", "📺"),
            ("", "📺"),
            (None, "📺"),
        ],
    )
    def test_mapping(self, show_type, emoji):
        assert get_type_emoji(show_type) == emoji


class TestShowBlocks:
    """Per-show section blocks."""

    def test_timed(self, formatter):
        block = formatter.format_timed_show(_make_show())
        assert block["type"] == "section"
        assert block["text"]["type"] == "mrkdwn"
        assert _text(block) == "👁 *Survivor* S46E03 (8:00 PM)"

    def test_untimed(self, formatter):
        assert _text(formatter.format_untimed_show(_make_show(airtime=""))) == "👁 *Survivor* S46E03 (N/A)"

    def test_multiple_episodes(self, formatter):
        episodes = [_make_show(airtime="", number=n) for n in (1, 2, 3)]
        blocks = formatter.format_multiple_episodes(episodes)
        assert [_text(b) for b in blocks] == ["👁 *Survivor* S46E01-03 (N/A)"]


class TestFormatNetworkGroups:
    """Document structure."""

    def test_empty(self, formatter):
        blocks = formatter.format_network_groups({})
        assert len(blocks) == 1
        assert _text(blocks[0]) == "No shows found for the specified criteria."

    def test_structure(self, formatter):
        groups = {
            "CBS": [_make_show()],
            "Netflix": [_make_show(2, name="Wednesday", type="Scripted", network="Netflix", airtime="")],
        }
        blocks = formatter.format_network_groups(groups)
        assert [b["type"] for b in blocks] == [
            "header",
            "divider",
            "header",
            "section",
            "divider",
            "header",
            "section",
            "context",
        ]
        assert _text(blocks[0]) == "Shows by Network"
        assert _text(blocks[2]) == "CBS"
        assert _text(blocks[5]) == "Netflix"
        assert _text(blocks[6]) == "📝 *Wednesday* S46E03 (N/A)"
        assert blocks[-1]["elements"][0]["text"] == "_Data provided by TVMaze API_"

    def test_header_blocks_are_plain_text(self, formatter):
        blocks = formatter.format_network_groups({"CBS": [_make_show()]})
        headers = [b for b in blocks if b["type"] == "header"]
        assert all(h["text"]["type"] == "plain_text" and h["text"]["emoji"] for h in headers)

    def test_empty_network(self, formatter):
        blocks = formatter.format_network_groups({"HBO": []})
        assert [b["type"] for b in blocks] == ["header", "divider", "header", "section", "context"]
        assert _text(blocks[3]) == "No shows found for this network"
