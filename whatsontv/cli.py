"""Command-line entry point and composition root.

    whatsontv --types Scripted,Reality --networks CBS,NBC
    whatsontv --fetch web --languages English
    whatsontv --output slack --config ./config.json
"""

import argparse
import logging
import re
import sys

from whatsontv import __version__
from whatsontv.config import AppConfig, load_config, merge_show_options
from whatsontv.core.errors import ConfigError
from whatsontv.core.types import FetchSource
from whatsontv.formatters.slack import SlackShowFormatter
from whatsontv.formatters.styles import PlainStyleService, create_style_service
from whatsontv.formatters.text import TextShowFormatter
from whatsontv.outputs.base import BaseOutputService
from whatsontv.outputs.console import ConsoleOutputService, ConsoleSink
from whatsontv.outputs.slack import SlackClient, SlackOutputService
from whatsontv.providers.tvmaze.client import TVMazeClient
from whatsontv.services.schedule import ScheduleService
from whatsontv.utilities.http import HttpClient
from whatsontv.utilities.logging import setup_logging

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _iso_date(value: str) -> str:
    if not _DATE_PATTERN.match(value):
        raise argparse.ArgumentTypeError(f"invalid date '{value}' (expected YYYY-MM-DD)")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="whatsontv",
        description="Show what's on TV and streaming today, from the TVMaze API.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("-d", "--date", type=_iso_date, help="Date to show (YYYY-MM-DD, default today)")
    parser.add_argument("-c", "--country", help="Home country code (default US)")
    parser.add_argument("--timezone", help="IANA timezone used to resolve today (e.g. America/New_York)")

    lists = parser.add_argument_group("filters", "Comma-separated; repeat the flag to add more")
    lists.add_argument("-t", "--types", action="append", help="Show types (e.g. Scripted,Reality)")
    lists.add_argument("-n", "--networks", action="append", help="Networks (e.g. CBS,Netflix)")
    lists.add_argument("-g", "--genres", action="append", help="Genres (e.g. Drama,Comedy)")
    lists.add_argument("-l", "--languages", action="append", help="Languages (e.g. English)")
    lists.add_argument("--min-airtime", dest="min_airtime", help="Earliest airtime to include (HH:MM)")
    lists.add_argument(
        "--exclude-show",
        dest="exclude_show",
        action="append",
        help="Hide shows whose name contains this text (repeatable)",
    )

    parser.add_argument(
        "-f",
        "--fetch",
        choices=[s.value for s in FetchSource],
        help="Which schedules to fetch (default all)",
    )
    parser.add_argument("--config", help="Path to config.json")
    parser.add_argument("-o", "--output", choices=["console", "slack"], default="console")
    parser.add_argument("--no-color", dest="color", action="store_false", default=None, help="Disable colors")
    parser.add_argument(
        "--no-time-sort",
        dest="sort_by_time",
        action="store_false",
        help="Keep feed order instead of sorting by airtime",
    )
    parser.add_argument("-D", "--debug", action="store_true", help="Enable debug logging")
    return parser


def _build_output(args: argparse.Namespace, config: AppConfig, http: HttpClient) -> BaseOutputService:
    if args.output == "slack":
        slack = config.slack
        if slack is None or not slack.is_complete:
            raise ConfigError("Slack output needs a token and channel (config 'slack' or SLACK_TOKEN/SLACK_CHANNEL)")
        client = SlackClient(
            token=slack.token,
            channel_id=slack.channel_id,
            username=slack.username,
            icon_emoji=slack.icon_emoji,
            http=http,
        )
        return SlackOutputService(SlackShowFormatter(), client, sort_by_time=args.sort_by_time)

    style = PlainStyleService() if args.color is False else create_style_service()
    return ConsoleOutputService(TextShowFormatter(style), ConsoleSink(), sort_by_time=args.sort_by_time)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Exit code: 0 on success, 1 on configuration or unexpected errors
    """
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.debug else None)

    try:
        config = load_config(args.config)
        options = merge_show_options(args, config)

        with HttpClient() as http:
            output = _build_output(args, config, http)
            shows = ScheduleService(TVMazeClient(http)).fetch_shows(options)
            output.render(shows, options.date)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("[CLI] Unhandled error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
