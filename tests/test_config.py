"""Tests for configuration loading."""

from fmv2fm2.config import get_config, load_config, reset_config


def test_defaults():
    """Test defaults without files or environment."""
    cfg = load_config(locations=[])

    assert cfg.output.directory is None
    assert cfg.output.overwrite is True
    assert cfg.conversion.include_comments is False
    assert cfg.logging.level == "WARNING"


def test_yaml_file(tmp_path):
    """Test values are read from the first existing config file."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "output:\n"
        "  directory: /movies\n"
        "  overwrite: false\n"
        "conversion:\n"
        "  include_comments: true\n"
        "logging:\n"
        "  level: info\n"
    )
    cfg = load_config(locations=[tmp_path / "missing.yaml", path])

    assert cfg.output.directory == "/movies"
    assert cfg.output.overwrite is False
    assert cfg.conversion.include_comments is True
    assert cfg.logging.level == "INFO"


def test_environment_overrides_file(tmp_path, monkeypatch):
    """Test FMV2FM2_* variables win over the config file."""
    path = tmp_path / "config.yaml"
    path.write_text("output:\n  overwrite: true\nlogging:\n  level: ERROR\n")
    monkeypatch.setenv("FMV2FM2_OVERWRITE", "no")
    monkeypatch.setenv("FMV2FM2_INCLUDE_COMMENTS", "yes")
    monkeypatch.setenv("FMV2FM2_LOG_LEVEL", "debug")

    cfg = load_config(locations=[path])

    assert cfg.output.overwrite is False
    assert cfg.conversion.include_comments is True
    assert cfg.logging.level == "DEBUG"


def test_empty_file(tmp_path):
    """Test an empty config file falls back to defaults."""
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(locations=[path]).output.overwrite is True


def test_global_config_is_cached(monkeypatch):
    """Test get_config caches until reset."""
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("FMV2FM2_LOG_LEVEL", "ERROR")
    assert get_config().logging.level == "WARNING"

    reset_config()
    assert get_config().logging.level == "ERROR"
