import pytest

from pwcompose import DIGITS, SYMBOLS, cli


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def _password(output):
    line = next(line for line in output.splitlines() if line.startswith("Your password: "))
    return line[len("Your password: "):]


def test_custom_lengths(monkeypatch, capsys):
    feed_input(monkeypatch, ["3", "1", "0", "0"])
    cli.main()

    password = _password(capsys.readouterr().out)
    assert len(password) == 4
    assert sum(c in SYMBOLS for c in password) == 3
    assert sum(c in DIGITS for c in password) == 1


def test_blank_answers_use_defaults(monkeypatch, capsys):
    feed_input(monkeypatch, ["", "", "", ""])
    cli.main()

    expected = sum(length for _, length in cli.settings.default_lengths())
    assert len(_password(capsys.readouterr().out)) == expected


def test_non_number_falls_back_to_default(monkeypatch, capsys):
    feed_input(monkeypatch, ["lots", "0", "0", "0"])
    cli.main()

    out = capsys.readouterr().out
    assert "That was not a number" in out
    assert len(_password(out)) == cli.settings.SYMBOL_LENGTH


def test_negative_length_reports_error(monkeypatch, capsys):
    feed_input(monkeypatch, ["-2", "1", "1", "1"])
    cli.main()

    out = capsys.readouterr().out
    assert "Could not build password:" in out
    assert "Your password" not in out


@pytest.mark.parametrize("answer", ["5", " 5 "])
def test_ask_length_parses_numbers(monkeypatch, answer):
    feed_input(monkeypatch, [answer])
    assert cli.ask_length(cli.CharacterClass.DIGIT, 2) == 5
