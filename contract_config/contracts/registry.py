# contract_config/contracts/registry.py

import json
from typing import Any, Dict

from web3 import Web3
from web3.contract import Contract

from .abi import ParsedABI
from ..config.accessor import ConfigAccessor
from ..core.errors import ConfigValueError
from ..core.logging import LoggingMixin


class ContractRegistry(LoggingMixin):
    """Caches parsed ABIs and Web3 contract instances for configured contracts"""

    def __init__(self, accessor: ConfigAccessor):
        self.accessor = accessor
        self.web3_contracts: Dict[str, Contract] = {}
        self._abi_cache: Dict[str, ParsedABI] = {}

    def parsed_abi(self, contract_name: str) -> ParsedABI:
        if contract_name not in self._abi_cache:
            self._abi_cache[contract_name] = self.accessor.parsed_abi(contract_name)
        return self._abi_cache[contract_name]

    def get_web3_contract(self, contract_name: str, w3: Web3) -> Contract:
        """Get or create a Web3 contract bound to the configured address and ABI"""
        if contract_name in self.web3_contracts:
            return self.web3_contracts[contract_name]

        address = self.accessor.contract_address(contract_name)
        try:
            checksum_address = Web3.to_checksum_address(address)
        except (ValueError, TypeError) as e:
            raise ConfigValueError(
                f"contract.{contract_name}.address",
                f'Invalid address configured for contract "{contract_name}": {address}',
            ) from e

        # raw JSON is only decoded once parse_abi has accepted it
        parsed = self.parsed_abi(contract_name)
        abi = json.loads(self.accessor.contract_abi(contract_name))
        if isinstance(abi, dict) and 'abi' in abi:
            abi = abi['abi']

        contract = w3.eth.contract(address=checksum_address, abi=abi)
        self.web3_contracts[contract_name] = contract

        self.log_debug("Web3 contract created", contract_name=contract_name,
                       method_count=len(parsed.methods), event_count=len(parsed.events))
        return contract

    def clear_caches(self) -> None:
        self.web3_contracts.clear()
        self._abi_cache.clear()

    def get_cache_stats(self) -> Dict[str, Any]:
        return {
            "web3_contracts_cached": len(self.web3_contracts),
            "abi_cache_size": len(self._abi_cache),
        }
