import pytest

from DiceRoll.config import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(tmp_path, monkeypatch):
    # Run from an empty dir so no stray config.toml or .env leaks in
    monkeypatch.chdir(tmp_path)
    for var in ("DICE_SEED", "LOGGING_LEVEL", "LOGGING_CONSOLE", "LOGGING_FILE", "ENV"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    s = load_settings()
    assert s.env == "dev"
    assert s.dice_seed is None
    assert s.logging_level == "INFO"
    assert s.logging_console == "INFO"
    assert s.logging_file == "NONE"


def test_toml_source(tmp_path):
    (tmp_path / "config.toml").write_text(
        """
[app]
env = "test"

[dice]
seed = 1234

[logging]
level = "debug"
console = false
to_file = true
file_path = "out/dice.jsonl"
"""
    )
    s = load_settings()
    assert s.env == "test"
    assert s.dice_seed == 1234
    assert s.logging_level == "DEBUG"
    assert s.logging_console == "NONE"
    assert s.logging_file == "DEBUG"
    assert s.logging_file_path == "out/dice.jsonl"


def test_toml_file_logging_toggles(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text('[logging]\nconsole = "warning"\n')
    s = load_settings()
    assert s.logging_console == "WARNING"
    assert s.logging_file == "NONE"

    cfg.write_text("[logging]\nto_file = true\n")
    assert load_settings().logging_file == "INFO"

    cfg.write_text('[logging]\nlevel = "error"\nto_file = false\n')
    assert load_settings().logging_file == "NONE"


def test_env_overrides_toml(tmp_path, monkeypatch):
    (tmp_path / "config.toml").write_text("[dice]\nseed = 1\n")
    monkeypatch.setenv("DICE_SEED", "77")
    assert load_settings().dice_seed == 77


def test_init_kwargs_win(monkeypatch):
    monkeypatch.setenv("DICE_SEED", "77")
    assert Settings(dice_seed=5).dice_seed == 5
