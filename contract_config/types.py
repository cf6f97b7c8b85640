# contract_config/types.py

from typing import List
from msgspec import Struct


class ContractDescriptor(Struct):
    name: str
    address: str
    abi: str
    deployed: int = 0


class TransformerDescriptor(Struct):
    label: str
    contracts: List[str]
