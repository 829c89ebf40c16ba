"""Registry of subcommands and their flags.

The argparse parser and the shell completer are both built from ``COMMANDS``.
"""

import argparse
from dataclasses import dataclass, field

# Value sources a flag's argument can be completed from
TOPICS = "topics"


@dataclass(frozen=True)
class FlagSpec:
    name: str
    help: str
    aliases: tuple[str, ...] = ()
    takes_value: bool = False
    repeatable: bool = False
    metavar: str | None = None
    value_source: str | None = None

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)

    @property
    def option_strings(self) -> list[str]:
        """Names as typed: `-t` for one character, `--topics` otherwise."""
        return [f"-{n}" if len(n) == 1 else f"--{n}" for n in self.names]

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")


@dataclass(frozen=True)
class CommandSpec:
    name: str
    usage: str
    flags: tuple[FlagSpec, ...] = field(default_factory=tuple)

    def flag_for(self, option: str) -> FlagSpec | None:
        """The flag that ``option`` (e.g. ``-t``) spells, if any."""
        for flag in self.flags:
            if option in flag.option_strings:
                return flag
        return None


REFRESH_FLAG = FlagSpec(
    name="refresh",
    help="refetch starred repositories instead of using the cached list",
)

COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name="repos",
        usage="list your starred repositories",
        flags=(
            FlagSpec(
                name="topics",
                aliases=("t",),
                help="topics to filter repositories (repeatable, comma-separated)",
                takes_value=True,
                repeatable=True,
                metavar="TOPIC",
                value_source=TOPICS,
            ),
            REFRESH_FLAG,
        ),
    ),
    CommandSpec(
        name="topics",
        usage="list topics in your starred repositories",
        flags=(REFRESH_FLAG,),
    ),
    CommandSpec(
        name="shell",
        usage="activate interactive shell mode",
    ),
)


def get_command(name: str, commands: tuple[CommandSpec, ...] = COMMANDS) -> CommandSpec | None:
    for command in commands:
        if command.name == name:
            return command
    return None


def add_command_parsers(subparsers, commands: tuple[CommandSpec, ...] = COMMANDS) -> None:
    """Register one subparser per command on an argparse subparsers action."""
    for command in commands:
        sub = subparsers.add_parser(command.name, help=command.usage, description=command.usage)
        for flag in command.flags:
            # Long form first so argparse shows it in usage
            option_strings = sorted(flag.option_strings, key=len, reverse=True)
            if flag.takes_value:
                sub.add_argument(
                    *option_strings,
                    dest=flag.dest,
                    action="append" if flag.repeatable else "store",
                    default=[] if flag.repeatable else None,
                    metavar=flag.metavar,
                    help=flag.help,
                )
            else:
                sub.add_argument(
                    *option_strings,
                    dest=flag.dest,
                    action="store_true",
                    help=flag.help,
                )


def format_usage_table(commands: tuple[CommandSpec, ...] = COMMANDS) -> str:
    width = max(len(c.name) for c in commands)
    return "\n".join(f"  {c.name:<{width}}  {c.usage}" for c in commands)
