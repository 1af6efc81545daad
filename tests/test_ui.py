import pytest

from rustdrills.ui import no_emoji, success, warn


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    assert no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran exercises/intro1.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/intro1.rs with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran exercises/intro1.rs")
    assert capsys.readouterr().out == "✓ Successfully ran exercises/intro1.rs\n"


def test_warn_with_emoji(capsys):
    warn("careful")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.endswith(" careful\n")


def test_success_with_emoji(capsys):
    success("done")
    out = capsys.readouterr().out
    assert out.startswith("✅")
    assert out.endswith(" done\n")


def test_brackets_are_not_treated_as_markup(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("[bold]literal[/bold]")
    assert "[bold]literal[/bold]" in capsys.readouterr().out