"""
Shared fixtures for deployment tests
"""

import json
import pytest
from unittest.mock import MagicMock
from loguru import logger

DEPLOYER = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'
TOKEN_ADDRESS = '0x5FbDB2315678afecb367f032d93F642f64180aa3'
TX_HASH = bytes.fromhex('ab' * 32)

TOKEN_ABI = [
    {
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "initialSupply", "type": "uint256"}
        ],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "totalSupply",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    }
]


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to captured streams between tests"""
    yield
    logger.remove()


@pytest.fixture
def artifacts_dir(tmp_path):
    """Hardhat-style artifacts tree with a compiled SinsoToken"""
    contract_dir = tmp_path / "contracts" / "SinsoToken.sol"
    contract_dir.mkdir(parents=True)

    (contract_dir / "SinsoToken.json").write_text(json.dumps({
        "contractName": "SinsoToken",
        "abi": TOKEN_ABI,
        "bytecode": "0x6080604052"
    }))

    return tmp_path


@pytest.fixture
def w3():
    """Mock Web3 connected to a node with one unlocked account"""
    w3 = MagicMock()
    w3.eth.default_account = None
    w3.eth.accounts = [DEPLOYER]
    w3.eth.chain_id = 31337
    w3.eth.gas_price = 1000000000
    w3.eth.get_transaction_count.return_value = 0

    constructor = w3.eth.contract.return_value.constructor.return_value
    constructor.estimate_gas.return_value = 100000
    constructor.transact.return_value = TX_HASH
    constructor.build_transaction.side_effect = lambda tx: dict(tx, data='0x6080604052')

    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = {
        'status': 1,
        'contractAddress': TOKEN_ADDRESS,
        'gasUsed': 95000
    }

    return w3
