"""Settings loader for DiceRoll."""

from pathlib import Path
from typing import Any

import tomllib
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_PATH = Path("config.toml")


def _norm_level(v: Any, default: str) -> str:
    # Handler levels may be given as a level name or as a bool toggle.
    if isinstance(v, str):
        return v.upper()
    if isinstance(v, bool):
        return default if v else "NONE"
    return default


def _toml_settings_source() -> dict[str, Any]:
    """Load settings from config.toml with keys mapped to Settings fields.

    This source has LOWER priority than env/.env so those can override TOML.
    Example:

        [dice]
        seed = 1234

        [logging]
        level = "DEBUG"
        console = true
        to_file = "INFO"
    """
    if not CONFIG_PATH.exists():
        return {}
    with CONFIG_PATH.open("rb") as f:
        t = tomllib.load(f)

    log_cfg = t.get("logging", {}) or {}
    overall = str(log_cfg.get("level", "INFO")).upper()
    out: dict[str, Any] = {
        "env": t.get("app", {}).get("env", "dev"),
        "dice_seed": (t.get("dice", {}) or {}).get("seed"),
        "logging_level": overall,
        "logging_console": _norm_level(log_cfg.get("console"), overall),
        # File logging stays off unless [logging] to_file is present
        "logging_file": (
            _norm_level(log_cfg["to_file"], overall) if "to_file" in log_cfg else "NONE"
        ),
        "logging_file_path": log_cfg.get("file_path", "logs/diceroll.jsonl"),
        "logging_max_bytes": log_cfg.get("max_bytes", 5_000_000),
        "logging_backup_count": log_cfg.get("backup_count", 5),
    }
    # Drop unset keys so field defaults apply
    return {k: v for k, v in out.items() if v is not None}


class Settings(BaseSettings):
    env: str = Field(default="dev")

    # --- Dice ---
    dice_seed: int | None = Field(
        default=None, description="Seed for the default RNG; unset means nondeterministic."
    )

    # --- Logging ---
    # Per-handler levels: INFO|DEBUG|WARNING|ERROR|CRITICAL|NONE
    logging_level: str = "INFO"
    logging_console: str = "INFO"
    logging_file: str = "NONE"
    logging_file_path: str = "logs/diceroll.jsonl"
    logging_max_bytes: int = 5_000_000
    logging_backup_count: int = 5

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Precedence (highest to lowest):
        # 1) init_settings (explicit overrides in code/tests)
        # 2) dotenv (.env in cwd)
        # 3) env_settings (OS env)
        # 4) TOML (config.toml in cwd)
        # 5) file_secret_settings
        return (
            init_settings,
            dotenv_settings,
            env_settings,
            _toml_settings_source,
            file_secret_settings,
        )


def load_settings() -> Settings:
    return Settings()
