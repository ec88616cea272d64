"""End-to-end CLI tests against mocked TVMaze and Slack endpoints."""

import json
from unittest.mock import patch

import httpx
import pytest

from whatsontv.cli import build_parser, main
from whatsontv.utilities.http import HttpClient


def _network_item(id: int, name: str, airtime: str = "20:00") -> dict:
    return {
        "season": 1,
        "number": 1,
        "airtime": airtime,
        "show": {
            "id": id,
            "name": name,
            "type": "Scripted",
            "language": "English",
            "genres": ["Drama"],
            "network": {"id": 1, "name": "CBS", "country": {"code": "US"}},
            "webChannel": None,
        },
    }


class _FakeServices:
    """TVMaze schedules plus Slack chat.postMessage."""

    def __init__(self, network=None, web=None):
        self.network = network or []
        self.web = web or []
        self.requests: list[httpx.Request] = []
        self.slack_payloads: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "slack.com":
            self.slack_payloads.append(json.loads(request.content))
            return httpx.Response(200, json={"ok": True})
        if request.url.path == "/schedule/web":
            return httpx.Response(200, json=self.web)
        return httpx.Response(200, json=self.network)


@pytest.fixture
def services():
    fake = _FakeServices()
    with patch("whatsontv.cli.HttpClient", lambda: HttpClient(transport=httpx.MockTransport(fake))):
        yield fake


class TestParser:
    """Argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.output == "console"
        assert args.sort_by_time is True
        assert args.color is None
        assert args.fetch is None

    def test_repeatable_lists(self):
        args = build_parser().parse_args(["-t", "Scripted,Reality", "-t", "News", "--exclude-show", "Days"])
        assert args.types == ["Scripted,Reality", "News"]
        assert args.exclude_show == ["Days"]

    def test_flags(self):
        args = build_parser().parse_args(["--no-color", "--no-time-sort", "-f", "web", "-D"])
        assert args.color is False
        assert args.sort_by_time is False
        assert args.fetch == "web"
        assert args.debug is True

    @pytest.mark.parametrize("argv", [["--date", "15/03/2024"], ["--fetch", "cable"], ["--output", "email"]])
    def test_invalid_arguments_exit(self, argv):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(argv)
        assert exc_info.value.code == 2


class TestMain:
    """main() wiring and exit codes."""

    def test_console_output(self, services, capsys):
        services.network = [_network_item(1, "Evening News", "19:00"), _network_item(2, "Late Drama", "21:00")]
        code = main(["--date", "2024-03-15", "--no-color", "--min-airtime", "20:00"])
        out = capsys.readouterr().out
        assert code == 0
        assert "WhatsOnTV v1.0.0" in out
        assert "Shows for 2024-03-15" in out
        assert "Late Drama" in out
        assert "Evening News" not in out
        assert "\x1b[" not in out

    def test_no_shows(self, services, capsys):
        code = main(["--date", "2024-03-15", "--no-color"])
        assert code == 0
        assert capsys.readouterr().out == "No shows found for the specified criteria.\n"

    def test_fetch_web_only(self, services):
        main(["--date", "2024-03-15", "--fetch", "web", "--no-color"])
        assert {r.url.path for r in services.requests} == {"/schedule/web"}

    def test_country_passed_to_tvmaze(self, services):
        main(["--date", "2024-03-15", "--country", "GB", "--fetch", "network", "--no-color"])
        assert services.requests[0].url.params["country"] == "GB"

    def test_config_file_used(self, services, tmp_path, capsys):
        config = tmp_path / "settings.json"
        config.write_text(json.dumps({"minAirtime": "", "showNameFilter": ["Late"]}), encoding="utf-8")
        services.network = [_network_item(1, "Evening News", "19:00"), _network_item(2, "Late Drama", "21:00")]
        assert main(["--date", "2024-03-15", "--config", str(config), "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "Evening News" in out
        assert "Late Drama" not in out

    def test_invalid_config_exits_1(self, services, tmp_path, capsys):
        config = tmp_path / "bad.json"
        config.write_text("{oops", encoding="utf-8")
        assert main(["--config", str(config)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_slack_without_settings_exits_1(self, services, capsys):
        assert main(["--date", "2024-03-15", "--output", "slack"]) == 1
        assert "Slack output needs a token" in capsys.readouterr().err
        assert services.requests == []

    def test_slack_output(self, services, monkeypatch):
        monkeypatch.setenv("SLACK_TOKEN", "xoxb-test")
        monkeypatch.setenv("SLACK_CHANNEL", "C123")
        services.network = [_network_item(1, "Late Drama", "21:00")]
        assert main(["--date", "2024-03-15", "--output", "slack"]) == 0
        assert [p["text"] for p in services.slack_payloads] == ["TV Shows for 2024-03-15", "TV Shows by Network"]
        assert all(p["channel"] == "C123" for p in services.slack_payloads)

    def test_unexpected_error_exits_1(self, services, capsys):
        with patch("whatsontv.cli.ScheduleService.fetch_shows", side_effect=RuntimeError("kaboom")):
            assert main(["--date", "2024-03-15"]) == 1
        assert "kaboom" in capsys.readouterr().err
