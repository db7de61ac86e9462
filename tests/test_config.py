from pathlib import Path

from fizztool.config import (
    Settings,
    default_config_path,
    env_lookup,
    load_settings,
    read_config_file,
    resolve_key,
)


def test_default_config_path_uses_home(tmp_path: Path):
    assert default_config_path(tmp_path) == tmp_path / ".fizztool.yaml"


def test_read_config_file_missing_returns_none(tmp_path: Path):
    assert read_config_file(tmp_path / "nope.yaml") is None


def test_read_config_file_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    assert read_config_file(path) is None


def test_read_config_file_rejects_invalid_yaml(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("key: [unclosed\n", encoding="utf-8")
    assert read_config_file(path) is None


def test_read_config_file_directory_is_ignored(tmp_path: Path):
    assert read_config_file(tmp_path) is None


def test_env_lookup_is_case_insensitive():
    assert env_lookup("key", {"KEY": "a"}) == "a"
    assert env_lookup("key", {"key": "b"}) == "b"
    assert env_lookup("KEY", {"Key": "c"}) == "c"
    assert env_lookup("key", {"OTHER": "d"}) is None


def test_env_lookup_prefers_upper_case_name():
    assert env_lookup("key", {"key": "lower", "KEY": "upper"}) == "upper"


def test_load_settings_reads_explicit_file(tmp_path: Path):
    path = tmp_path / "cfg.yaml"
    path.write_text("key: fizz\n", encoding="utf-8")

    settings = load_settings(str(path), environ={})

    assert settings == Settings(key="fizz", config_file_used=str(path))


def test_load_settings_falls_back_to_home(tmp_path: Path):
    (tmp_path / ".fizztool.yaml").write_text("KEY: from-home\n", encoding="utf-8")

    settings = load_settings(None, environ={}, home=tmp_path)

    assert settings.key == "from-home"
    assert settings.config_file_used == str(tmp_path / ".fizztool.yaml")


def test_load_settings_environment_beats_file(tmp_path: Path):
    path = tmp_path / "cfg.yaml"
    path.write_text("key: from-file\n", encoding="utf-8")

    settings = load_settings(str(path), environ={"KEY": "from-env"})

    assert settings.key == "from-env"


def test_load_settings_without_sources(tmp_path: Path):
    settings = load_settings(None, environ={}, home=tmp_path)

    assert settings == Settings()


def test_load_settings_unreadable_file_is_silent(tmp_path: Path):
    settings = load_settings(str(tmp_path / "absent.yaml"), environ={"key": "x"})

    assert settings.key == "x"
    assert settings.config_file_used == ""


def test_load_settings_stringifies_scalar_values(tmp_path: Path):
    path = tmp_path / "cfg.yaml"
    path.write_text("key: 42\n", encoding="utf-8")

    assert load_settings(str(path), environ={}).key == "42"


def test_resolve_key_precedence():
    settings = Settings(key="from-settings")

    assert resolve_key("flag", settings) == "flag"
    assert resolve_key(None, settings) == "from-settings"
    assert resolve_key("", settings) == "from-settings"
    assert resolve_key(None, Settings()) == ""
