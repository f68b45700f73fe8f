"""
Startup configuration for the Reversi game and server.

Values are read once from the environment (or CLI flags) and frozen.
"""
import os
from enum import Enum
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .board import BLACK, WHITE
from .errors import ConfigurationError


class AIStrategy(str, Enum):
    BASIC = "basic"
    ADVANCED = "advanced"


class GameConfig(BaseModel):
    """Who plays against whom, fixed for the life of the process."""
    model_config = ConfigDict(frozen=True)

    opponent_is_ai: bool = True
    ai_player: int = WHITE
    ai_strategy: AIStrategy = AIStrategy.BASIC
    seed: Optional[int] = None

    @field_validator("ai_player")
    @classmethod
    def _check_player(cls, v: int) -> int:
        if v not in (BLACK, WHITE):
            raise ValueError(f"ai_player must be {BLACK} (black) or {WHITE} (white)")
        return v


class ServerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_PLAYERS = {"black": BLACK, "b": BLACK, "1": BLACK, "white": WHITE, "w": WHITE, "-1": WHITE}


def parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigurationError(f"Not a boolean: {value!r}")


def parse_player(value: str) -> int:
    v = value.strip().lower()
    if v not in _PLAYERS:
        raise ConfigurationError(f"Unknown player: {value!r}", context={"expected": "black|white"})
    return _PLAYERS[v]


def load_config(environ: Optional[Mapping[str, str]] = None) -> GameConfig:
    """Build a GameConfig from REVERSI_* environment variables"""
    env = os.environ if environ is None else environ
    values = {}

    if "REVERSI_VS_AI" in env:
        values["opponent_is_ai"] = parse_bool(env["REVERSI_VS_AI"])
    if "REVERSI_AI_PLAYER" in env:
        values["ai_player"] = parse_player(env["REVERSI_AI_PLAYER"])
    if "REVERSI_AI_STRATEGY" in env:
        values["ai_strategy"] = env["REVERSI_AI_STRATEGY"].strip().lower()
    if env.get("REVERSI_SEED"):
        values["seed"] = env["REVERSI_SEED"]

    try:
        return GameConfig(**values)
    except ValidationError as e:
        raise ConfigurationError("Invalid game configuration", context={"errors": e.error_count()}) from e


def load_server_config(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    env = os.environ if environ is None else environ
    values = {}
    if "REVERSI_HOST" in env:
        values["host"] = env["REVERSI_HOST"]
    if "REVERSI_PORT" in env:
        values["port"] = env["REVERSI_PORT"]
    if "REVERSI_LOG_LEVEL" in env:
        values["log_level"] = env["REVERSI_LOG_LEVEL"].lower()

    try:
        return ServerConfig(**values)
    except ValidationError as e:
        raise ConfigurationError("Invalid server configuration", context={"errors": e.error_count()}) from e
