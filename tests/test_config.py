from __future__ import annotations

from othello.config import Config


def test_defaults():
    cfg = Config()
    assert cfg.search.max_depth == 5
    assert cfg.search.time_limit_ms == 4800
    assert cfg.search.time_limit_s == 4.8
    assert cfg.log_level == "INFO"


def test_missing_file_gives_defaults(tmp_path):
    cfg = Config.load_from_toml(str(tmp_path / "absent.toml"))
    assert cfg == Config()


def test_load_from_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        'log_level = "DEBUG"\n'
        "[search]\nmax_depth = 3\ntime_limit_ms = 1000\nunknown = 1\n"
        "[web]\nport = 8080\n"
    )
    cfg = Config.load_from_toml(str(path))
    assert cfg.search.max_depth == 3
    assert cfg.search.time_limit_ms == 1000
    assert cfg.web.port == 8080
    assert cfg.log_level == "DEBUG"
    assert not hasattr(cfg.search, "unknown")


def test_env_overrides():
    cfg = Config().apply_env_overrides({"OTHELLO_SEARCH_DEPTH": "7", "OTHELLO_TIME_LIMIT_MS": "250"})
    assert cfg.search.max_depth == 7
    assert cfg.search.time_limit_s == 0.25


def test_bad_env_override_is_ignored(caplog):
    cfg = Config().apply_env_overrides({"OTHELLO_SEARCH_DEPTH": "deep"})
    assert cfg.search.max_depth == 5
    assert "OTHELLO_SEARCH_DEPTH" in caplog.text


def test_toml_values_are_coerced_or_ignored(tmp_path, caplog):
    path = tmp_path / "config.toml"
    path.write_text(
        '[search]\nmax_depth = "4"\ntime_limit_ms = "fast"\n'
        '[web]\nport = 8080.0\ndebug = "yes"\n'
    )
    cfg = Config.load_from_toml(str(path))
    assert cfg.search.max_depth == 4
    assert cfg.search.time_limit_ms == 4800
    assert cfg.search.time_limit_s == 4.8
    assert cfg.web.port == 8080
    assert cfg.web.debug is False
    assert "time_limit_ms" in caplog.text
    assert "debug" in caplog.text
