"""
Shared fixtures
"""

import json
import pytest
from unittest.mock import Mock
from loguru import logger

from blockchain.artifacts import ArtifactStore
from utils.network_config import NetworkConfig


# Hardhat default account #0, public test key
TEST_PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'
TEST_ADDRESS = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'

DEPLOYED_ADDRESS = '0xabcdef0123456789abcdef0123456789abcdef01'
TX_HASH = b'\x11' * 32

CHAIN_GALLERY_ABI = [
    {
        "inputs": [],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "owner",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]
CHAIN_GALLERY_BYTECODE = '0x6080604052348015600f57600080fd5b50603f80601d6000396000f3fe'


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks bound to captured streams between tests"""
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env out of the tests"""
    for var in (
        'DEPLOY_NETWORK',
        'DEPLOY_RPC_URL',
        'DEPLOYER_PRIVATE_KEY',
        'DEPLOY_ARTIFACTS_DIR',
        'DEPLOY_LOG_FILE',
        'DEPLOY_LOG_LEVEL',
        'SEPOLIA_RPC_URL'
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def write_artifact(tmp_path):
    """Write a Hardhat-style artifact under tmp_path/artifacts"""
    root = tmp_path / 'artifacts'

    def _write(
        contract_name='ChainGallery',
        source_name='contracts/ChainGallery.sol',
        abi=None,
        bytecode=CHAIN_GALLERY_BYTECODE
    ):
        directory = root / source_name
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f'{contract_name}.json'
        path.write_text(json.dumps({
            '_format': 'hh-sol-artifact-1',
            'contractName': contract_name,
            'sourceName': source_name,
            'abi': CHAIN_GALLERY_ABI if abi is None else abi,
            'bytecode': bytecode,
            'deployedBytecode': bytecode,
            'linkReferences': {},
            'deployedLinkReferences': {}
        }))
        return path

    _write.root = root
    return _write


@pytest.fixture
def artifact_store(write_artifact):
    """Store holding a single ChainGallery artifact"""
    write_artifact()
    return ArtifactStore(write_artifact.root)


@pytest.fixture
def network():
    """Local development network"""
    return NetworkConfig(
        name='localhost',
        rpc_url='http://127.0.0.1:8545',
        chain_id=31337,
        development=True,
        confirmation_timeout=5,
        gas_multiplier=1.2
    )


@pytest.fixture
def receipt():
    """Successful contract-creation receipt"""
    return {
        'status': 1,
        'contractAddress': DEPLOYED_ADDRESS,
        'blockNumber': 7,
        'gasUsed': 154321,
        'transactionHash': TX_HASH
    }


@pytest.fixture
def w3(receipt):
    """Mock Web3 instance that mines every deployment"""
    w3 = Mock()
    w3.eth.chain_id = 31337
    w3.eth.wait_for_transaction_receipt.return_value = receipt
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.get_transaction_count.return_value = 3

    constructor = w3.eth.contract.return_value.constructor.return_value
    constructor.transact.return_value = TX_HASH
    constructor.estimate_gas.return_value = 100000
    constructor.build_transaction.side_effect = lambda params: dict(params, data=CHAIN_GALLERY_BYTECODE)

    return w3


@pytest.fixture
def unlocked_wallet():
    """Node-managed deployer account"""
    wallet = Mock()
    wallet.is_local = False
    wallet.address = TEST_ADDRESS
    return wallet


@pytest.fixture
def local_wallet():
    """In-process signing deployer account"""
    wallet = Mock()
    wallet.is_local = True
    wallet.address = TEST_ADDRESS
    wallet.sign_transaction.return_value = Mock(raw_transaction=b'\xf8signed')
    return wallet
