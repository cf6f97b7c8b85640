# tests/conftest.py
"""
pytest fixtures for contract configuration tests
"""

import json

import pytest
import yaml

from contract_config.config.accessor import ConfigAccessor
from contract_config.config.tree import ConfigTree
from contract_config.core.logging import ContractConfigLogger


VOW_ADDRESS = "0xa950524441892a31ebddf91d3ceefa04bf454466"
ETH_FLIP_ADDRESS = "0xd8a04f5412223f513dc55f839574430f5ec15531"
BAT_FLIP_ADDRESS = "0xaa745404d55f88c108a28c86abe7b5a1e7817c07"

VOW_ABI = [
    {
        "type": "constructor",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "vat_", "type": "address"},
            {"name": "flapper_", "type": "address"},
            {"name": "flopper_", "type": "address"},
        ],
    },
    {"type": "function", "name": "cage", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
    {
        "type": "function",
        "name": "file",
        "inputs": [{"name": "what", "type": "bytes32"}, {"name": "data", "type": "uint256"}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "heal",
        "inputs": [{"name": "rad", "type": "uint256"}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "event",
        "name": "LogNote",
        "anonymous": True,
        "inputs": [
            {"indexed": True, "name": "sig", "type": "bytes4"},
            {"indexed": True, "name": "usr", "type": "address"},
            {"indexed": True, "name": "arg1", "type": "bytes32"},
            {"indexed": True, "name": "arg2", "type": "bytes32"},
            {"indexed": False, "name": "data", "type": "bytes"},
        ],
    },
]

FLIP_ABI = [
    {
        "type": "constructor",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "vat_", "type": "address"}, {"name": "ilk_", "type": "bytes32"}],
    },
    {
        "type": "function",
        "name": "kick",
        "inputs": [
            {"name": "usr", "type": "address"},
            {"name": "gal", "type": "address"},
            {"name": "tab", "type": "uint256"},
            {"name": "lot", "type": "uint256"},
            {"name": "bid", "type": "uint256"},
        ],
        "outputs": [{"name": "id", "type": "uint256"}],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "bids",
        "inputs": [{"name": "", "type": "uint256"}],
        "outputs": [
            {"name": "bid", "type": "uint256"},
            {"name": "lot", "type": "uint256"},
            {"name": "guy", "type": "address"},
        ],
        "stateMutability": "view",
    },
    {
        "type": "event",
        "name": "Kick",
        "anonymous": False,
        "inputs": [
            {"indexed": False, "name": "id", "type": "uint256"},
            {"indexed": False, "name": "lot", "type": "uint256"},
            {"indexed": True, "name": "usr", "type": "address"},
        ],
    },
]


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams that close between tests"""
    yield
    ContractConfigLogger.reset()


@pytest.fixture
def config_data():
    """Sample exporter/contract configuration"""
    return {
        "exporter": {
            "vow_file": {
                "path": "transformers/events/vow_file/initializer",
                "type": "eth_event",
                "contracts": ["MCD_VOW"],
                "rank": "0",
            },
            "flip_kick": {"type": "eth_event", "contracts": ["ETH_FLIP_A", "BAT_FLIP_A"]},
            "mismatched": {"contracts": ["ETH_FLIP_A", "MCD_VOW"]},
            "empty": {"contracts": []},
        },
        "contract": {
            "MCD_VOW": {"address": VOW_ADDRESS, "abi": json.dumps(VOW_ABI), "deployed": 8928152},
            "ETH_FLIP_A": {"address": ETH_FLIP_ADDRESS, "abi": json.dumps(FLIP_ABI), "deployed": 8928180},
            "BAT_FLIP_A": {"address": BAT_FLIP_ADDRESS, "abi": json.dumps(FLIP_ABI), "deployed": 8928160},
            "NO_BLOCK": {"address": BAT_FLIP_ADDRESS, "abi": json.dumps(FLIP_ABI)},
            "SENTINEL": {"address": BAT_FLIP_ADDRESS, "abi": json.dumps(FLIP_ABI), "deployed": -1},
            "NO_ABI": {"address": VOW_ADDRESS},
            "BAD_ABI": {"address": VOW_ADDRESS, "abi": "not json"},
            "BAD_ADDRESS": {"address": "vow", "abi": json.dumps(VOW_ABI)},
        },
    }


@pytest.fixture
def config_file(tmp_path, config_data):
    """Sample configuration written as YAML"""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(config_data))
    return path


@pytest.fixture
def tree(config_data):
    return ConfigTree(config_data)


@pytest.fixture
def accessor(tree):
    """Accessor over an in-memory tree"""
    return ConfigAccessor(tree=tree)


@pytest.fixture
def file_accessor(config_file):
    """Accessor that loads from a file on first use"""
    return ConfigAccessor(config_file)
