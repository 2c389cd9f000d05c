# pawnstorm/config.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import logging
import os
import tomllib

log = logging.getLogger(__name__)

# Material values in pawns
PIECE_VALUES = {
    "PAWN": 1.0,
    "KNIGHT": 3.0,
    "BISHOP": 3.3,
    "ROOK": 5.0,
    "QUEEN": 9.0,
    "KING": 0.0,
}

@dataclass
class SearchConfig:
    max_depth: int = 3
    time_limit_ms: int = 2000  # soft budget, polled at node entry
    random_move_probability: float = 0.3  # strength limiter, not a fallback
    side: str = "black"  # side the bot plays
    seed: Optional[int] = None  # fixed seed for reproducible bot games

    def validate(self) -> "SearchConfig":
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
        if self.time_limit_ms < 0:
            raise ValueError(f"time_limit_ms must be >= 0, got {self.time_limit_ms}")
        if not 0.0 <= self.random_move_probability <= 1.0:
            raise ValueError(
                f"random_move_probability must be in [0, 1], got {self.random_move_probability}"
            )
        if str(self.side).lower() not in ("white", "black"):
            raise ValueError(f"side must be 'white' or 'black', got {self.side!r}")
        return self

@dataclass
class EvalConfig:
    piece_values: Dict[str, float] = field(default_factory=lambda: PIECE_VALUES.copy())
    center_pawn_bonus: float = 0.3  # pawn on a central file
    center_minor_bonus: float = 0.5  # knight/bishop on a central square
    center_rows: Tuple[int, ...] = (3, 4)
    center_cols: Tuple[int, ...] = (3, 4)

@dataclass
class UIConfig:
    engine_name: str = "Pawnstorm"
    player_side: str = "white"
    bot_delay_ms: int = 500  # pause before the bot replies in interactive adapters
    api_port: int = 8000

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if not hasattr(target, k):
                    log.warning("ignoring unknown config key %s.%s", section, k)
                    continue
                if isinstance(getattr(target, k), tuple):
                    v = tuple(v)
                setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        cfg.search.validate()
        return cfg


def configure_logging(level: Optional[str] = None):
    """Apply ``level`` (or CONFIG.log_level) to the root logger."""
    logging.basicConfig(
        level=(level or CONFIG.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("PAWNSTORM_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("PAWNSTORM_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.max_depth = int(override_depth)
    except ValueError:
        log.warning("ignoring PAWNSTORM_SEARCH_DEPTH=%r: not an integer", override_depth)
