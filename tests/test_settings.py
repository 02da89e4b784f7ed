import importlib

from pwcompose import CharacterClass, settings


def test_env_int_parsing(monkeypatch):
    monkeypatch.setenv("PWCOMPOSE_TEST_INT", "7")
    assert settings._env_int("PWCOMPOSE_TEST_INT", 3) == 7

    monkeypatch.setenv("PWCOMPOSE_TEST_INT", "seven")
    assert settings._env_int("PWCOMPOSE_TEST_INT", 3) == 3

    monkeypatch.setenv("PWCOMPOSE_TEST_INT", "-1")
    assert settings._env_int("PWCOMPOSE_TEST_INT", 3) == 3

    monkeypatch.setenv("PWCOMPOSE_TEST_INT", "0")
    assert settings._env_int("PWCOMPOSE_TEST_INT", 3, minimum=1) == 3

    monkeypatch.delenv("PWCOMPOSE_TEST_INT")
    assert settings._env_int("PWCOMPOSE_TEST_INT", 3) == 3


def test_env_bool_and_list(monkeypatch):
    monkeypatch.setenv("PWCOMPOSE_TEST_FLAG", " Yes ")
    assert settings._env_bool("PWCOMPOSE_TEST_FLAG") is True
    monkeypatch.setenv("PWCOMPOSE_TEST_FLAG", "off")
    assert settings._env_bool("PWCOMPOSE_TEST_FLAG", True) is False

    monkeypatch.setenv("PWCOMPOSE_TEST_LIST", "https://a.example, ,https://b.example")
    assert settings._env_list("PWCOMPOSE_TEST_LIST") == ["https://a.example", "https://b.example"]
    monkeypatch.delenv("PWCOMPOSE_TEST_LIST")
    assert settings._env_list("PWCOMPOSE_TEST_LIST") is None


def test_default_lengths_follow_environment(monkeypatch):
    monkeypatch.setenv("PWCOMPOSE_SYMBOLS", "1")
    monkeypatch.setenv("PWCOMPOSE_DIGITS", "3")
    monkeypatch.setenv("PWCOMPOSE_UPPER", "oops")
    monkeypatch.setenv("PWCOMPOSE_LOWER", "6")
    monkeypatch.setenv("PWCOMPOSE_MAX_CLASSES", "0")
    try:
        importlib.reload(settings)
        assert settings.default_lengths() == [
            (CharacterClass.SYMBOL, 1),
            (CharacterClass.DIGIT, 3),
            (CharacterClass.UPPER, 2),
            (CharacterClass.LOWER, 6),
        ]
        assert settings.MAX_CLASSES == 16
    finally:
        monkeypatch.undo()
        importlib.reload(settings)
