# contract_config/config/accessor.py

"""
Typed, fail-fast access to contract and transformer metadata.

Expected layout of the configuration file::

    [exporter.vow_file]
        path = "transformers/events/vow_file/initializer"
        type = "eth_event"
        contracts = ["MCD_VOW"]

    [contract.MCD_VOW]
        address = "0x..."
        abi = '[{"type": "function", ...}]'
        deployed = 8928152

Every required lookup raises a ContractConfigError subclass when the value
is missing; the caller at the process boundary decides whether to exit.
"""

import os
import threading
from pathlib import Path
from typing import List, Optional, Sequence

from eth_utils import is_address

from .tree import ConfigTree, resolve_config_path
from ..contracts.abi import ParsedABI, parse_abi
from ..contracts.compare import compare_contract_abi
from ..core.errors import (
    ABIMismatchError,
    EmptyContractListError,
    MismatchedContractABIError,
    MissingConfigError,
)
from ..core.logging import LoggingMixin
from ..types import ContractDescriptor, TransformerDescriptor


UNCONFIGURED_BLOCK = -1


class ConfigAccessor(LoggingMixin):
    """Reads contract metadata from a configuration tree loaded once on first use"""

    def __init__(self, config_path: Optional[os.PathLike] = None, *,
                 tree: Optional[ConfigTree] = None,
                 env_prefix: Optional[str] = None):
        self.config_path = Path(config_path) if config_path is not None else None
        self.env_prefix = env_prefix
        self._tree = tree
        self._lock = threading.Lock()
        self.load_count = 0

    @property
    def initialized(self) -> bool:
        return self._tree is not None

    @property
    def tree(self) -> ConfigTree:
        self.initialize()
        return self._tree

    def initialize(self) -> None:
        """Load the configuration tree once; later calls are no-ops"""
        if self._tree is not None:
            return

        with self._lock:
            if self._tree is not None:
                return

            path = resolve_config_path(self.config_path)
            tree = ConfigTree.from_file(path, env_prefix=self.env_prefix)
            self.load_count += 1
            self.log_info(f"Using config file: {path}", config_file=str(path))
            self._tree = tree

    def _require_names(self, names: Sequence[str], message: str) -> None:
        if not names:
            self.log_error(message)
            raise EmptyContractListError(message)

    def get_string(self, key: str) -> str:
        value = self.tree.get_string(key)
        if value == "":
            self.log_error("No environment configuration variable set for key", key=key)
            raise MissingConfigError(key)
        return value

    def transformer_contract_names(self, transformer_label: str) -> List[str]:
        """Contract names listed under ``exporter.<label>.contracts``"""
        key = f"exporter.{transformer_label}.contracts"
        contracts = self.tree.get_string_list(key)
        if not contracts:
            self.log_error("No contracts configured for transformer", transformer=transformer_label)
            raise MissingConfigError(key, f'No contracts configured for transformer: "{transformer_label}"')
        return contracts

    def transformer(self, transformer_label: str) -> TransformerDescriptor:
        return TransformerDescriptor(
            label=transformer_label,
            contracts=self.transformer_contract_names(transformer_label),
        )

    def contract_abi(self, contract_name: str) -> str:
        key = f"contract.{contract_name}.abi"
        contract_abi = self.tree.get_string(key)
        if contract_abi == "":
            self.log_error("No ABI configured for contract", contract_name=contract_name)
            raise MissingConfigError(key, f'No ABI configured for contract: "{contract_name}"')
        return contract_abi

    def parsed_abi(self, contract_name: str) -> ParsedABI:
        return parse_abi(self.contract_abi(contract_name), contract=contract_name)

    def matching_abi_for_contracts(self, contract_names: Sequence[str], strict: bool = False) -> str:
        """ABI shared by every contract in ``contract_names``.

        A single transformer may run against many contracts, so every ABI
        after the first is compared against the first and any structural
        difference raises MismatchedContractABIError. Returns the first
        contract's raw ABI string.
        """
        self._require_names(contract_names, "No contracts to get ABI for")

        first = contract_names[0]
        contract_abi = self.contract_abi(first)
        parsed = parse_abi(contract_abi, contract=first)
        for contract_name in contract_names[1:]:
            next_parsed = self.parsed_abi(contract_name)
            try:
                compare_contract_abi(parsed, next_parsed, strict=strict)
            except ABIMismatchError as e:
                self.log_error("ABIs don't match", contract_name=contract_name, error=str(e))
                raise MismatchedContractABIError(first, contract_name, e) from e

        self.log_debug("ABIs match", contract_count=len(contract_names))
        return contract_abi

    def first_abi(self, contract_names: Sequence[str]) -> str:
        self._require_names(contract_names, "No contracts to get ABI for")
        return self.contract_abi(contract_names[0])

    def deployment_block(self, contract_name: str) -> int:
        value = self.tree.get_int(f"contract.{contract_name}.deployed", default=UNCONFIGURED_BLOCK)
        if value == UNCONFIGURED_BLOCK:
            self.log_info("No deployment block configured for contract, defaulting to 0",
                          contract_name=contract_name)
            return 0
        return value

    def min_deployment_block(self, contract_names: Sequence[str]) -> int:
        self._require_names(contract_names, "No contracts supplied")
        return min(self.deployment_block(name) for name in contract_names)

    def contract_addresses(self, contract_names: Sequence[str]) -> List[str]:
        self._require_names(contract_names, "No contracts supplied")
        return [self.contract_address(name) for name in contract_names]

    def contract_address(self, contract_name: str) -> str:
        address = self.get_string(f"contract.{contract_name}.address")
        if not is_address(address):
            self.log_warning("Configured address is not a valid hex address",
                             contract_name=contract_name)
        return address

    def contract(self, contract_name: str) -> ContractDescriptor:
        return ContractDescriptor(
            name=contract_name,
            address=self.contract_address(contract_name),
            abi=self.contract_abi(contract_name),
            deployed=self.deployment_block(contract_name),
        )

    def transformer_labels(self) -> List[str]:
        return self.tree.keys("exporter")

    def contract_names(self) -> List[str]:
        return self.tree.keys("contract")
