"""Interactive shell: read a line, run it as a gh-starred command, repeat."""

import logging
import sys

from prompt_toolkit import PromptSession

from .commands import COMMANDS, TOPICS
from .completion import fuzzy_completer
from .errors import StarredError

logger = logging.getLogger(__name__)

PROMPT = "gh-starred> "


def make_session(app) -> PromptSession:
    completer = fuzzy_completer(COMMANDS, value_lookups={TOPICS: app.topics})
    return PromptSession(PROMPT, completer=completer, complete_while_typing=True)


def execute(app, line: str) -> None:
    """Run one shell line as if it were passed on the command line.

    Arguments are split on whitespace; quoting is not supported. Errors are
    reported on stderr and never end the shell.
    """
    from .cli import PROG, dispatch

    args = line.split()
    if not args:
        return
    try:
        dispatch([PROG, *args], app)
    except StarredError as e:
        print(f"error: {e.kind}: {e}", file=sys.stderr)
    except SystemExit:
        # argparse already printed usage or help
        pass
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
    except Exception:
        logger.exception("command failed: %s", line)


def run_shell(app, session: PromptSession | None = None) -> None:
    """Prompt until end of input (Ctrl-D).

    Ctrl-C discards the line being typed, or interrupts the running command.
    """
    session = session or make_session(app)
    while True:
        try:
            line = session.prompt()
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        execute(app, line)
