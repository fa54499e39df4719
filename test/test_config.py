import pytest

import config as config_module
from config import Config, _load_config, _parse_frames, ensure_config
from echonova.progress import DEFAULT_FRAMES


@pytest.fixture
def restore_config():
    saved = {
        key: getattr(Config, key)
        for key in ("VERBOSITY", "SHOW_COLOR", "SUPPRESS_MESSAGES", "SPINNER_FRAMES", "LOG_LEVEL")
    }
    yield
    for key, value in saved.items():
        setattr(Config, key, value)


def test_load_config_skips_comments_and_inline_comments(tmp_path):
    path = tmp_path / "config"
    path.write_text(
        "# comment\n\nVERBOSITY = low  # quieter\nnot a setting\nSHOW_COLOR=false\n",
        encoding="utf-8",
    )

    assert _load_config(str(path)) == {"VERBOSITY": "low", "SHOW_COLOR": "false"}


def test_load_config_missing_file(tmp_path):
    assert _load_config(str(tmp_path / "missing")) == {}


def test_parse_frames_space_separated():
    assert _parse_frames(" a b c ") == ("a", "b", "c")


def test_parse_frames_one_glyph_per_character():
    assert _parse_frames("|/-\\|/-\\") == tuple("|/-\\|/-\\")


def test_default_template_frames_match_spinner():
    assert _parse_frames(config_module._DEFAULT_SPINNER_FRAMES) == DEFAULT_FRAMES


def test_ensure_config_writes_template_once(tmp_path, monkeypatch):
    path = tmp_path / "nested" / "config"
    monkeypatch.setenv("ECHONOVA_CONFIG", str(path))

    assert ensure_config() == str(path)
    assert "VERBOSITY=high" in path.read_text(encoding="utf-8")

    path.write_text("VERBOSITY=low\n", encoding="utf-8")
    ensure_config()
    assert path.read_text(encoding="utf-8") == "VERBOSITY=low\n"


def test_reload_reads_values(tmp_path, restore_config):
    path = tmp_path / "config"
    path.write_text(
        "VERBOSITY=Medium\nSHOW_COLOR=False\nSUPPRESS_MESSAGES=true\n"
        "SPINNER_FRAMES=abcdefgh\nLOG_LEVEL=info\n",
        encoding="utf-8",
    )

    Config.reload(str(path))

    assert Config.VERBOSITY == "medium"
    assert Config.SHOW_COLOR is False
    assert Config.SUPPRESS_MESSAGES is True
    assert Config.SPINNER_FRAMES == tuple("abcdefgh")
    assert Config.LOG_LEVEL == "INFO"
    Config.validate()


def test_reload_defaults_for_empty_file(tmp_path, restore_config):
    path = tmp_path / "config"
    path.write_text("", encoding="utf-8")

    Config.reload(str(path))

    assert Config.VERBOSITY == "high"
    assert Config.SHOW_COLOR is True
    assert Config.SUPPRESS_MESSAGES is False
    assert Config.SPINNER_FRAMES == DEFAULT_FRAMES


def test_validate_rejects_unknown_verbosity(monkeypatch):
    monkeypatch.setattr(Config, "VERBOSITY", "chatty")

    with pytest.raises(ValueError, match="Unknown VERBOSITY 'chatty'"):
        Config.validate()


def test_validate_rejects_wrong_frame_count(monkeypatch):
    monkeypatch.setattr(Config, "SPINNER_FRAMES", ("-", "|"))

    with pytest.raises(ValueError, match="exactly 8 glyphs, got 2"):
        Config.validate()
