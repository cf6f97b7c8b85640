# contract_config/config/tree.py

"""
Read-only hierarchical configuration with dotted-key lookup.

Keys are case-insensitive: every table key is lower-cased on load and every
lookup key is lower-cased before traversal, so ``contract.MCD_VOW.abi`` and
``contract.mcd_vow.abi`` address the same value.
"""

import json
import os
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from ..core.errors import ConfigFileError, ConfigFileNotFoundError, ConfigValueError
from ..core.settings import ENV_CONFIG_FILE


CONFIG_FILE_NAMES = ("config.toml", "config.yaml", "config.yml", "config.json")

_LIST_SEPARATORS = re.compile(r"[\s,]+")


def _normalize(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k).lower(): _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(v) for v in value]
    return value


def _read_file(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        if suffix == '.toml':
            with open(path, 'rb') as f:
                data = tomllib.load(f)
        elif suffix in ('.yaml', '.yml'):
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        elif suffix == '.json':
            with open(path, 'r') as f:
                data = json.load(f)
        else:
            raise ConfigFileError(f"Unsupported config file type: {path.suffix}", path=str(path))
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigFileError(f"Could not parse config file {path}: {e}", path=str(path)) from e
    except OSError as e:
        raise ConfigFileError(f"Could not read config file {path}: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError(
            f"Config file {path} must contain a table at the top level, got {type(data).__name__}",
            path=str(path),
        )
    return data


def resolve_config_path(path: Optional[os.PathLike] = None,
                        env: Optional[Mapping[str, str]] = None,
                        search_dirs: Optional[Sequence[Path]] = None) -> Path:
    """Locate the configuration file.

    Order: explicit ``path``, then ``CONTRACT_CONFIG_FILE``, then the first
    ``config.{toml,yaml,yml,json}`` found in ``search_dirs`` (default: the
    working directory and its ``config/`` subdirectory).
    """
    if path is not None:
        candidate = Path(path)
        if not candidate.is_file():
            raise ConfigFileNotFoundError(f"Could not find environment file: {candidate}", path=str(candidate))
        return candidate

    env = os.environ if env is None else env
    env_path = env.get(ENV_CONFIG_FILE)
    if env_path:
        return resolve_config_path(env_path)

    if search_dirs is None:
        cwd = Path.cwd()
        search_dirs = (cwd, cwd / 'config')

    for directory in search_dirs:
        for name in CONFIG_FILE_NAMES:
            candidate = Path(directory) / name
            if candidate.is_file():
                return candidate

    searched = ", ".join(str(d) for d in search_dirs)
    raise ConfigFileNotFoundError(f"Could not find environment file in: {searched}")


class ConfigTree:
    """Hierarchical string-keyed configuration loaded from a single file"""

    def __init__(self, data: Optional[Mapping[str, Any]] = None,
                 env_prefix: Optional[str] = None,
                 source: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self._data: Dict[str, Any] = _normalize(data or {})
        self.env_prefix = env_prefix.rstrip('_').upper() if env_prefix else None
        self.source = source
        self._environ = environ

    @classmethod
    def from_file(cls, path: os.PathLike, env_prefix: Optional[str] = None) -> 'ConfigTree':
        path = Path(path)
        if not path.is_file():
            raise ConfigFileNotFoundError(f"Could not find environment file: {path}", path=str(path))
        return cls(_read_file(path), env_prefix=env_prefix, source=path)

    def _env_value(self, key: str) -> Optional[str]:
        if not self.env_prefix:
            return None
        environ = os.environ if self._environ is None else self._environ
        env_key = f"{self.env_prefix}_{key.replace('.', '_').upper()}"
        return environ.get(env_key)

    def get(self, key: str, default: Any = None) -> Any:
        key = key.lower()

        override = self._env_value(key)
        if override is not None:
            return override

        node: Any = self._data
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def has(self, key: str) -> bool:
        marker = object()
        return self.get(key, marker) is not marker

    def keys(self, prefix: str = "") -> List[str]:
        """Sorted child keys of the table at ``prefix``"""
        node = self.get(prefix) if prefix else self._data
        if not isinstance(node, dict):
            return []
        return sorted(node.keys())

    def get_string(self, key: str) -> str:
        value = self.get(key)
        if value is None or isinstance(value, (dict, list)):
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def get_string_list(self, key: str) -> List[str]:
        value = self.get(key)
        if value is None:
            return []
        if isinstance(value, list):
            return [str(item) for item in value]
        if isinstance(value, str):
            return [item for item in _LIST_SEPARATORS.split(value) if item]
        raise ConfigValueError(key, f"Expected a list of strings for key \"{key}\", got {type(value).__name__}")

    def get_int(self, key: str, default: int = 0) -> int:
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            raise ConfigValueError(key, f"Expected an integer for key \"{key}\", got a boolean")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            for base in (10, 0):
                try:
                    return int(value.strip(), base)
                except ValueError:
                    continue
        raise ConfigValueError(key, f"Expected an integer for key \"{key}\", got {value!r}")

    def __repr__(self) -> str:
        return f"ConfigTree(source={self.source!s}, env_prefix={self.env_prefix!r})"
