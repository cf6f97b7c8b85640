# contract_config/cli/context.py

"""
CLI context

Holds the single ConfigAccessor shared by every command in one invocation
and the registry built on top of it.
"""

import logging
from pathlib import Path
from typing import Optional

from ..config.accessor import ConfigAccessor
from ..contracts.registry import ContractRegistry
from ..core.logging import ContractConfigLogger, log_with_context
from ..core.settings import Settings


class CLIContext:
    def __init__(self, config_file: Optional[Path] = None, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self.config_file = config_file or self.settings.config_file
        self.logger = ContractConfigLogger.get_logger('cli.context')
        self._accessor: Optional[ConfigAccessor] = None
        self._registry: Optional[ContractRegistry] = None

    @property
    def accessor(self) -> ConfigAccessor:
        if self._accessor is None:
            self._accessor = ConfigAccessor(self.config_file, env_prefix=self.settings.env_prefix)
            self._accessor.initialize()
            log_with_context(self.logger, logging.DEBUG, "Config accessor ready",
                             config_file=str(self._accessor.tree.source))
        return self._accessor

    @property
    def registry(self) -> ContractRegistry:
        if self._registry is None:
            self._registry = ContractRegistry(self.accessor)
        return self._registry
