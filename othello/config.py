# othello/config.py
from dataclasses import dataclass, field, fields
import logging
import os
import tomllib

logger = logging.getLogger(__name__)


def _set_typed(target, name: str, value) -> None:
    """Assign ``value`` coerced to the type of the field default; skip it if it does not fit."""
    expected = type(getattr(target, name))
    try:
        if expected is bool and not isinstance(value, bool):
            raise TypeError(f"expected a boolean, got {value!r}")
        setattr(target, name, expected(value))
    except (TypeError, ValueError):
        logger.warning("Ignoring %s=%r: not a valid %s", name, value, expected.__name__)


@dataclass
class SearchConfig:
    max_depth: int = 5
    time_limit_ms: int = 4800

    @property
    def time_limit_s(self) -> float:
        return self.time_limit_ms / 1000.0


@dataclass
class WebConfig:
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    web: WebConfig = field(default_factory=WebConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "web"):
            target = getattr(cfg, section)
            known = {f.name for f in fields(target)}
            for k, v in raw.get(section, {}).items():
                if k in known:
                    _set_typed(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

    def apply_env_overrides(self, environ=os.environ) -> "Config":
        """Apply ``OTHELLO_SEARCH_DEPTH`` / ``OTHELLO_TIME_LIMIT_MS`` if set."""
        for name, attr in (
            ("OTHELLO_SEARCH_DEPTH", "max_depth"),
            ("OTHELLO_TIME_LIMIT_MS", "time_limit_ms"),
        ):
            value = environ.get(name)
            if not value:
                continue
            try:
                setattr(self.search, attr, int(value))
            except ValueError:
                logger.warning("Ignoring non-integer %s=%r", name, value)
        return self


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OTHELLO_CONFIG_TOML", "config.toml")).apply_env_overrides()
