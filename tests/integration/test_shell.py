"""Integration tests for the interactive shell loop.

The prompt session is faked; commands run through the real dispatcher.
"""

from unittest.mock import MagicMock

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from gh_starred.commands import TOPICS
from gh_starred.completion import fuzzy_completer
from gh_starred.shell import execute, run_shell


def _session(*lines):
    """A prompt session returning ``lines`` in order, then EOF."""
    session = MagicMock()
    session.prompt.side_effect = [*lines, EOFError()]
    return session


class TestRunShell:
    def test_runs_each_line_as_a_command(self, app, out):
        run_shell(app, session=_session("topics", "repos -t go"))

        text = out.getvalue()
        assert "terminal" in text
        assert "https://gh.test/cli/cli" in text

    def test_reuses_the_cache_across_commands(self, app, client):
        run_shell(app, session=_session("repos", "topics", "repos -t cli"))

        assert app.cache.fetches == 1

    def test_ends_on_eof(self, app):
        session = _session()

        run_shell(app, session=session)

        assert session.prompt.call_count == 1

    def test_discards_line_on_keyboard_interrupt(self, app, out):
        session = _session(KeyboardInterrupt(), "topics")

        run_shell(app, session=session)

        assert session.prompt.call_count == 3
        assert "python" in out.getvalue()

    def test_ignores_blank_lines(self, app, client):
        run_shell(app, session=_session("", "   "))

        client.invoke.assert_not_called()

    def test_survives_usage_errors(self, app, out, capsys):
        run_shell(app, session=_session("clone", "repos --nope", "topics"))

        assert "python" in out.getvalue()
        assert "usage:" in capsys.readouterr().err

    def test_reports_fetch_errors_and_continues(self, app, out, capsys, make_client):
        app.cache.client = make_client(fail_pages={1})
        session = _session("repos", "topics")

        run_shell(app, session=session)

        err = capsys.readouterr().err
        assert err.count("error: PartialBatchError:") == 2
        assert session.prompt.call_count == 3

    def test_recovers_once_fetches_succeed(self, app, out, capsys, make_client):
        good_client = app.cache.client
        app.cache.client = make_client(fail_pages={1})
        execute(app, "topics")
        app.cache.client = good_client

        execute(app, "topics")

        assert "error: PartialBatchError:" in capsys.readouterr().err
        assert "python" in out.getvalue()

    def test_interrupting_a_command_returns_to_the_prompt(self, app, client, capsys):
        app.batch_size = 1
        client.invoke.side_effect = KeyboardInterrupt()
        session = _session("topics", "topics")

        run_shell(app, session=session)

        assert session.prompt.call_count == 3
        assert capsys.readouterr().err.count("interrupted") == 2


class TestShellCompletion:
    def test_completes_topics_from_the_shared_cache(self, app):
        completer = fuzzy_completer(value_lookups={TOPICS: app.topics})

        completions = completer.get_completions(
            Document("repos -t py"), CompleteEvent(completion_requested=True)
        )

        assert [c.text for c in completions] == ["python"]
        assert app.cache.fetches == 1

        run_shell(app, session=_session("topics"))
        assert app.cache.fetches == 1
