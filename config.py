"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from typing import Literal


def _env_flag(name: str, default: str) -> bool:
    """Read a true/false environment variable."""
    return os.getenv(name, default).lower() == "true"


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


def _parse_reshuffle_policy() -> Literal["every_round", "when_low"]:
    """Parse RESHUFFLE_POLICY environment variable."""
    policy = os.getenv("RESHUFFLE_POLICY", "every_round").strip().lower()
    if policy not in ("every_round", "when_low"):
        raise ValueError(f"RESHUFFLE_POLICY must be every_round or when_low, got {policy!r}")
    return policy  # type: ignore[return-value]


@dataclass(frozen=True)
class GameConfig:
    """Table rules."""

    dealer_stands_on: int = field(
        default_factory=lambda: int(os.getenv("DEALER_STANDS_ON", "17"))
    )
    reshuffle_policy: Literal["every_round", "when_low"] = field(
        default_factory=_parse_reshuffle_policy
    )
    # Enough for the longest possible round of two hands
    reshuffle_threshold: int = field(
        default_factory=lambda: int(os.getenv("RESHUFFLE_THRESHOLD", "21"))
    )
    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class ConsoleConfig:
    """Text interface configuration."""

    clear_screen: bool = field(default_factory=lambda: _env_flag("CLEAR_SCREEN", "true"))
    ask_name: bool = field(default_factory=lambda: _env_flag("ASK_PLAYER_NAME", "true"))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "false"))
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper()
    )

    game: GameConfig = field(default_factory=GameConfig)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)

    @property
    def effective_log_level(self) -> str:
        """Return the log level, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level


# Global configuration instance
config = AppConfig()
