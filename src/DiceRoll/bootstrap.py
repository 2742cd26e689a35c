"""Process-level wiring: settings, logging and the default RNG."""

from __future__ import annotations

from DiceRoll.config import Settings, load_settings
from DiceRoll.dice import DiceRNG, set_default_rng
from DiceRoll.logging import get_logger, redact_settings, setup_logging

_log = get_logger(__name__)


def init(settings: Settings | None = None) -> Settings:
    """Load settings, configure logging and install the default RNG.

    Safe to call more than once; each call replaces the previous logging
    handlers and default RNG.
    """
    settings = settings or load_settings()
    setup_logging(settings)
    set_default_rng(DiceRNG(settings.dice_seed))
    _log.info("dice.startup", config=redact_settings(settings))
    return settings
