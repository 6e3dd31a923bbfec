from rustlings.ui import no_emoji, success, warn


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert no_emoji() is False


def test_no_emoji_accepts_empty_value(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "")
    assert no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("boom")
    assert capsys.readouterr().out == "! boom\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("all good")
    assert capsys.readouterr().out == "✓ all good\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("careful")
    out = capsys.readouterr().out
    assert out.startswith("⚠️ ")
    assert out.rstrip("\n").endswith("careful")


def test_message_is_not_treated_as_markup(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("[bold]literal")
    assert capsys.readouterr().out == "! [bold]literal\n"