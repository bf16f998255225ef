"""Tests for UpdateNotifier: gating, rendering and writing to stderr."""

import io

import pytest
from rich.console import Console

from update_notifier import config
from update_notifier import notifier as notifier_mod
from update_notifier.models import NotifyOptions
from update_notifier.notifier import UpdateNotifier, colorize_border


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, force_terminal=False, color_system=None, width=200)


@pytest.fixture
def stderr_buffer():
    return io.StringIO()


@pytest.fixture
def make_notifier(stderr_buffer):
    """Build the tester notifier (0.0.2 installed, 1.0.0 published)."""

    def _make(current="0.0.2", latest="1.0.0", automated=False, notify_in_script=False):
        return UpdateNotifier(
            "update-notifier-tester",
            current,
            latest,
            is_automated_context=automated,
            notify_in_automated_context=notify_in_script,
            console=_console(stderr_buffer),
        )

    return _make


def test_default_message_written_to_stderr(make_notifier, stderr_buffer):
    notifier = make_notifier()

    text = notifier.notify(NotifyOptions(defer=False, is_global=True))

    out = stderr_buffer.getvalue()
    assert text is not None
    assert out == "\n" + text + "\n"
    assert "Update available 0.0.2 → 1.0.0" in out
    assert "Run npm i --location=global update-notifier-tester to update" in out


def test_supports_custom_message(make_notifier, stderr_buffer):
    make_notifier().notify(NotifyOptions(is_global=True, message="custom message"))

    assert "custom message" in stderr_buffer.getvalue()


def test_supports_message_with_placeholders(make_notifier, stderr_buffer):
    message = "\n".join(
        [
            "Package Name: {packageName}",
            "Current Version: {currentVersion}",
            "Latest Version: {latestVersion}",
            "Update Command: {updateCommand}",
        ]
    )

    make_notifier().notify(NotifyOptions(is_global=True, message=message))

    out = stderr_buffer.getvalue()
    assert "Package Name: update-notifier-tester" in out
    assert "Current Version: 0.0.2" in out
    assert "Latest Version: 1.0.0" in out
    assert "Update Command: npm i --location=global update-notifier-tester" in out
    assert "{" not in out


def test_excludes_global_flag_when_not_global(make_notifier, stderr_buffer):
    make_notifier().notify(NotifyOptions(is_global=False))

    assert "Run npm i update-notifier-tester to update" in stderr_buffer.getvalue()


def test_notify_in_script_defaults_to_false(make_notifier, stderr_buffer):
    notifier = make_notifier()

    assert notifier.notify_in_automated_context is False
    notifier.notify(NotifyOptions())
    assert "Update available" in stderr_buffer.getvalue()


def test_suppressed_when_running_as_script(make_notifier, stderr_buffer):
    notifier = make_notifier(automated=True)

    assert notifier.notify(NotifyOptions()) is None
    assert "Update available" not in stderr_buffer.getvalue()


def test_outputs_in_script_when_override_set(make_notifier, stderr_buffer):
    make_notifier(automated=True, notify_in_script=True).notify(NotifyOptions())

    assert "Update available" in stderr_buffer.getvalue()


def test_outputs_in_script_when_options_disable_suppression(make_notifier, stderr_buffer):
    make_notifier(automated=True).notify(NotifyOptions(suppress_in_automated_context=False))

    assert "Update available" in stderr_buffer.getvalue()


def test_no_output_when_current_is_latest(make_notifier, stderr_buffer):
    make_notifier(current="1.0.0", automated=True, notify_in_script=True).notify(NotifyOptions())

    assert "Update available" not in stderr_buffer.getvalue()


def test_no_output_when_current_is_newer_than_latest(make_notifier, stderr_buffer):
    make_notifier(current="1.0.1", automated=True, notify_in_script=True).notify(NotifyOptions())

    assert "Update available" not in stderr_buffer.getvalue()


def test_unparseable_version_prints_nothing(make_notifier, stderr_buffer):
    assert make_notifier(latest="not-a-version").notify() is None
    assert stderr_buffer.getvalue() == ""


def test_global_opt_out(monkeypatch, make_notifier, stderr_buffer):
    monkeypatch.setattr(config, "DISABLED", True)

    assert make_notifier().notify(NotifyOptions()) is None
    assert stderr_buffer.getvalue() == ""


def test_unknown_border_style_never_raises(make_notifier, stderr_buffer):
    assert make_notifier().notify(NotifyOptions(border_style="dotted")) is None
    assert stderr_buffer.getvalue() == ""


def test_notify_is_repeatable(make_notifier, stderr_buffer):
    notifier = make_notifier()

    first = notifier.notify(NotifyOptions(is_global=True))
    second = notifier.notify(NotifyOptions(is_global=False))

    assert first != second
    assert stderr_buffer.getvalue() == "\n" + first + "\n" + "\n" + second + "\n"


def test_defer_writes_at_exit(monkeypatch, make_notifier, stderr_buffer):
    registered = []
    monkeypatch.setattr(notifier_mod.atexit, "register", lambda func, *args: registered.append((func, args)))

    text = make_notifier().notify(NotifyOptions(defer=True))

    assert text is not None
    assert stderr_buffer.getvalue() == ""
    assert len(registered) == 1

    func, args = registered[0]
    func(*args)
    assert stderr_buffer.getvalue() == "\n" + text + "\n"


def test_border_color_only_on_terminals(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    buffer = io.StringIO()
    terminal = Console(file=buffer, force_terminal=True, color_system="standard", width=200)
    notifier = UpdateNotifier("update-notifier-tester", "0.0.2", "1.0.0", console=terminal)

    notifier.notify(NotifyOptions(border_color="yellow"))

    out = buffer.getvalue()
    assert "\x1b[33m" in out
    assert "Update available 0.0.2 → 1.0.0" in out


def test_colorize_border_styles_edges_only():
    text = colorize_border("╭─╮\n│x│\n╰─╯", "yellow")

    styled = {(span.start, span.end) for span in text.spans}
    assert (0, 3) in styled  # top row
    assert (4, 5) in styled and (6, 7) in styled  # side edges
    assert (5, 6) not in styled  # content
    assert (8, 11) in styled  # bottom row


def test_colorize_border_without_color():
    assert colorize_border("abc", None).spans == []


def test_default_console_targets_stderr():
    notifier = UpdateNotifier("pkg", "1.0.0", "2.0.0")

    assert notifier.console.stderr is True


def test_notify_in_script_config_lifts_suppression(monkeypatch, make_notifier, stderr_buffer):
    monkeypatch.setattr(config, "NOTIFY_IN_SCRIPT", True)

    text = make_notifier(automated=True).notify(NotifyOptions())

    assert text is not None
    assert "Update available" in stderr_buffer.getvalue()


def test_presentation_options_default_to_current_config(monkeypatch, make_notifier, stderr_buffer):
    monkeypatch.setattr(config, "BOX_PADDING", 0)
    monkeypatch.setattr(config, "BORDER_STYLE", "double")

    text = make_notifier().notify(NotifyOptions())

    assert text.split("\n")[0].startswith("╔")
    assert any(row.startswith("║Run npm i") for row in text.split("\n"))


def test_empty_border_color_disables_styling(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setattr(config, "BORDER_COLOR", "yellow")
    buffer = io.StringIO()
    terminal = Console(file=buffer, force_terminal=True, color_system="standard", width=200)

    UpdateNotifier("update-notifier-tester", "0.0.2", "1.0.0", console=terminal).notify(NotifyOptions(border_color=""))

    assert "\x1b[33m" not in buffer.getvalue()
