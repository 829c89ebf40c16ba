"""CLI commands for listing starred repositories."""

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from .cache import ResultCache
from .commands import COMMANDS, add_command_parsers, format_usage_table
from .errors import StarredError
from .models import Repository
from .settings import get_settings
from .topics import collect_topics, filter_by_topics, split_topic_args

PROG = "gh-starred"

logger = logging.getLogger(__name__)


class App:
    """State shared by every command run in this process.

    The shell re-dispatches each line through the same App, so the starred
    list is fetched at most once per session unless ``--refresh`` is given.
    """

    def __init__(self, cache: ResultCache, batch_size: int, console: Console | None = None):
        self.cache = cache
        self.batch_size = batch_size
        self.console = console or Console()

    def starred(self, batch_size: int | None = None, refresh: bool = False) -> tuple[Repository, ...]:
        return self.cache.get_or_fetch(batch_size or self.batch_size, bypass_cache=refresh)

    def topics(self) -> list[str]:
        return collect_topics(self.starred())

    def close(self):
        self.cache.client.close()


def create_app() -> App:
    from .api_client import get_api_client

    settings = get_settings()
    return App(ResultCache(get_api_client(settings)), batch_size=settings.batch_size)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def build_parser(prog: str = PROG, batch_size: int | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="make operations about your starred repositories",
        epilog="commands:\n" + format_usage_table(COMMANDS),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--batch-size",
        type=_positive_int,
        default=batch_size,
        help="pages of starred repositories to retrieve concurrently "
        f"(default: {batch_size if batch_size is not None else 'from settings'})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log fetch progress to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    add_command_parsers(subparsers, COMMANDS)
    return parser


def render_repos(console: Console, repos: Sequence[Repository]) -> None:
    table = Table("Name", "URL")
    for repo in repos:
        table.add_row(repo.name, repo.url)
    console.print(table)


def cmd_repos(app: App, args: argparse.Namespace) -> None:
    repos = app.starred(args.batch_size, refresh=args.refresh)
    render_repos(app.console, filter_by_topics(repos, split_topic_args(args.topics)))


def cmd_topics(app: App, args: argparse.Namespace) -> None:
    repos = app.starred(args.batch_size, refresh=args.refresh)
    for topic in collect_topics(repos):
        app.console.print(topic, markup=False, highlight=False)


def cmd_shell(app: App, args: argparse.Namespace) -> None:
    from .shell import run_shell

    if args.batch_size:
        app.batch_size = args.batch_size
    run_shell(app)


HANDLERS = {
    "repos": cmd_repos,
    "topics": cmd_topics,
    "shell": cmd_shell,
}


def dispatch(argv: list[str], app: App) -> None:
    """Run one command line; ``argv[0]`` is the program name.

    StarredError propagates to the caller. argparse usage errors raise
    SystemExit.
    """
    parser = build_parser(prog=argv[0] if argv else PROG, batch_size=app.batch_size)
    args = parser.parse_args(argv[1:])

    # -v applies to this command line only; NOTSET falls back to the root level
    logging.getLogger("gh_starred").setLevel(logging.DEBUG if args.verbose else logging.NOTSET)

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.print_help()
        return
    handler(app, args)
    logger.debug(app.cache.stats())


def _configure_logging():
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    argv = list(sys.argv[1:] if argv is None else argv)

    app = None
    try:
        app = create_app()
        dispatch([PROG, *argv], app)
    except StarredError as e:
        print(f"error: {e.kind}: {e}", file=sys.stderr)
        return 1
    except SystemExit as e:
        # argparse exits 0 for --help and 2 for usage errors
        return e.code if isinstance(e.code, int) else 2
    finally:
        if app is not None:
            app.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
