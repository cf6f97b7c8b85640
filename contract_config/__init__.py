# contract_config/__init__.py

import logging
import os
from typing import Mapping, Optional

from .core.settings import Settings
from .core.logging import ContractConfigLogger, log_with_context
from .core.errors import (
    ContractConfigError,
    ConfigFileError,
    ConfigFileNotFoundError,
    ConfigValueError,
    MissingConfigError,
    EmptyContractListError,
    ABIParseError,
    ABIMismatchError,
    MismatchedConstructorsError,
    MismatchedOuterMethodsError,
    MismatchedOuterEventsError,
    MismatchedContractABIError,
)
from .config.tree import ConfigTree, resolve_config_path
from .config.accessor import ConfigAccessor
from .contracts.abi import ParsedABI, parse_abi
from .contracts.compare import compare_contract_abi, find_abi_mismatch
from .contracts.registry import ContractRegistry
from .types import ContractDescriptor, TransformerDescriptor


def create_accessor(config_file: Optional[os.PathLike] = None,
                    env_vars: Optional[Mapping[str, str]] = None,
                    eager: bool = True) -> ConfigAccessor:
    """Build the process-wide ConfigAccessor.

    Logging is configured from the environment first. With ``eager`` set the
    configuration file is loaded immediately so a missing or malformed file
    fails at startup rather than on first lookup.
    """
    settings = Settings.from_env(env_vars)
    _configure_logging_early(settings)

    logger = ContractConfigLogger.get_logger('init')

    accessor = ConfigAccessor(
        config_file or settings.config_file,
        env_prefix=settings.env_prefix,
    )
    if eager:
        accessor.initialize()

    log_with_context(logger, logging.DEBUG, "Config accessor created",
                     config_file=str(accessor.tree.source) if eager else None)
    return accessor


def _configure_logging_early(settings: Settings) -> None:
    ContractConfigLogger.configure(
        log_dir=settings.log_dir,
        log_level=settings.log_level,
        console_enabled=settings.log_console,
        file_enabled=settings.log_file,
        structured_format=settings.log_structured,
    )
