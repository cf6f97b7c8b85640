# contract_config/core/settings.py

from msgspec import Struct
from typing import Optional, Mapping
from pathlib import Path
import os

from dotenv import load_dotenv


ENV_CONFIG_FILE = "CONTRACT_CONFIG_FILE"
ENV_PREFIX = "CONTRACT_CONFIG_ENV_PREFIX"


def _env_flag(env: Mapping[str, str], name: str, default: str) -> bool:
    return env.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(Struct):
    config_file: Optional[Path] = None
    env_prefix: Optional[str] = None
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    log_console: bool = True
    log_file: bool = False
    log_structured: bool = False

    @classmethod
    def from_env(cls, env_vars: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Read settings from the environment, loading a local .env first.

        An explicit ``env_vars`` mapping is used as-is and skips .env loading.
        """
        if env_vars is None:
            load_dotenv()
            env = os.environ
        else:
            env = env_vars

        config_file = env.get(ENV_CONFIG_FILE)
        log_dir = env.get("CONTRACT_CONFIG_LOG_DIR")

        return cls(
            config_file=Path(config_file) if config_file else None,
            env_prefix=env.get(ENV_PREFIX) or None,
            log_level=env.get("CONTRACT_CONFIG_LOG_LEVEL", "INFO").upper(),
            log_dir=Path(log_dir) if log_dir else None,
            log_console=_env_flag(env, "CONTRACT_CONFIG_LOG_CONSOLE", "true"),
            log_file=_env_flag(env, "CONTRACT_CONFIG_LOG_FILE", "false"),
            log_structured=_env_flag(env, "CONTRACT_CONFIG_LOG_STRUCTURED", "false"),
        )
