# contract_config/contracts/__init__.py

from .abi import ParsedABI, ABIMethod, ABIEvent, parse_abi
from .compare import compare_contract_abi, find_abi_mismatch
