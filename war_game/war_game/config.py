"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class GameConfig(BaseModel):
    """Game configuration."""

    seed: int | None = None  # None = nondeterministic
    max_turns: int | None = None  # Safety cap for autoplay
    canonical_shuffle: bool = False  # Use the unbiased [i, n-1] shuffle
    cards: list[str] | None = None  # Custom deck as card codes (e.g. "AS")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_cards: bool = False
    show_score: bool = True


class GameLogConfig(BaseModel):
    """Configuration for the JSONL game log."""

    enabled: bool = False
    output_path: str = "war_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
