"""Context-sensitive tab completion for the interactive shell.

``StarredCompleter`` decides *what* to offer from the words before the
cursor: command names for the first word, a command's flags after it, and
flag values (topics) right after a flag that takes them. Filtering and
ranking against the fragment being typed is done by prompt_toolkit's
``FuzzyCompleter``.
"""

import logging
from collections.abc import Callable, Iterable, Mapping

from prompt_toolkit.completion import CompleteEvent, Completer, Completion, FuzzyCompleter
from prompt_toolkit.document import Document

from .commands import COMMANDS, CommandSpec, get_command
from .errors import StarredError
from .models import Suggestion

logger = logging.getLogger(__name__)

ValueLookup = Callable[[], Iterable[str]]

FRAGMENT_PATTERN = r"^[^\s]*"


class StarredCompleter(Completer):
    """Offers commands, flags, or flag values depending on cursor position.

    ``value_lookups`` maps a flag's value source (e.g. ``"topics"``) to a
    callable returning the candidate values. It is only called when the
    cursor sits on such a flag's value.
    """

    def __init__(
        self,
        commands: tuple[CommandSpec, ...] = COMMANDS,
        value_lookups: Mapping[str, ValueLookup] | None = None,
    ):
        self.commands = commands
        self.value_lookups = dict(value_lookups or {})

    def get_completions(self, document: Document, complete_event: CompleteEvent):
        fragment = document.get_word_before_cursor(WORD=True)
        before = document.text_before_cursor
        words = before[: len(before) - len(fragment)].split()
        start = -len(fragment)

        # Still typing the first word
        if not words:
            for command in self.commands:
                yield Completion(command.name, start_position=start, display_meta=command.usage)
            return

        command = get_command(words[0], self.commands)
        if command is None:
            return

        if len(words) > 1:
            flag = command.flag_for(words[-1])
            if flag is not None and flag.takes_value and flag.value_source in self.value_lookups:
                for value in self._lookup(flag.value_source):
                    yield Completion(value, start_position=start, display_meta=flag.name)
                return

        for flag in command.flags:
            for option in flag.option_strings:
                yield Completion(option, start_position=start, display_meta=flag.help)

    def _lookup(self, source: str) -> list[str]:
        try:
            return list(self.value_lookups[source]())
        except StarredError as e:
            logger.warning("cannot complete %s: %s: %s", source, e.kind, e)
            return []


def fuzzy_completer(
    commands: tuple[CommandSpec, ...] = COMMANDS,
    value_lookups: Mapping[str, ValueLookup] | None = None,
) -> FuzzyCompleter:
    """The shell's completer: ``StarredCompleter`` with fuzzy ranking.

    The fuzzy fragment is everything back to the last whitespace, so ``--t``
    matches ``--topics``. The pattern is matched against the reversed text
    before the cursor and must stay anchored, otherwise a trailing space
    makes the previous word the fragment.
    """
    return FuzzyCompleter(StarredCompleter(commands, value_lookups), pattern=FRAGMENT_PATTERN)


def complete(
    text: str,
    cursor_position: int | None = None,
    commands: tuple[CommandSpec, ...] = COMMANDS,
    value_lookups: Mapping[str, ValueLookup] | None = None,
) -> list[Suggestion]:
    """Ranked suggestions for ``text`` with the cursor at ``cursor_position``.

    The cursor defaults to the end of the line.
    """
    if cursor_position is None:
        cursor_position = len(text)
    document = Document(text, cursor_position)
    completer = fuzzy_completer(commands, value_lookups)
    return [
        Suggestion(c.text, c.display_meta_text)
        for c in completer.get_completions(document, CompleteEvent(completion_requested=True))
    ]
