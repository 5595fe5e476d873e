"""
Network Settings
Loads deployment configuration from the environment and connects to the node
"""

import os
from dataclasses import dataclass
from typing import Optional
from web3 import Web3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

DEFAULT_RPC_URL = "http://127.0.0.1:8545"  # local Hardhat node
DEFAULT_ARTIFACTS_DIR = "artifacts"
DEFAULT_TIMEOUT = 300


@dataclass(frozen=True)
class NetworkSettings:
    """Deployment settings read from the environment"""

    rpc_url: str = DEFAULT_RPC_URL
    private_key: Optional[str] = None
    chain_id: Optional[int] = None
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR
    timeout: int = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    log_file: Optional[str] = None


def _int_env(name: str, default: Optional[int] = None) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default

    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def load_settings() -> NetworkSettings:
    """
    Load settings from environment variables (and .env if present)

    Returns:
        NetworkSettings instance
    """
    load_dotenv()

    return NetworkSettings(
        rpc_url=os.getenv('DEPLOY_RPC_URL') or DEFAULT_RPC_URL,
        private_key=os.getenv('DEPLOYER_PRIVATE_KEY') or None,
        chain_id=_int_env('CHAIN_ID'),
        artifacts_dir=os.getenv('ARTIFACTS_DIR') or DEFAULT_ARTIFACTS_DIR,
        timeout=_int_env('DEPLOY_TIMEOUT', DEFAULT_TIMEOUT),
        log_level=os.getenv('LOG_LEVEL') or "INFO",
        log_file=os.getenv('LOG_FILE') or None,
    )


def connect(settings: NetworkSettings) -> Web3:
    """
    Connect to the configured JSON-RPC endpoint

    Args:
        settings: Network settings

    Returns:
        Connected Web3 instance
    """
    w3 = Web3(Web3.HTTPProvider(settings.rpc_url))

    if not w3.is_connected():
        raise ConnectionError(f"Failed to connect to {settings.rpc_url}")

    logger.info(f"Connected to {settings.rpc_url}")
    return w3


def load_signer(settings: NetworkSettings):
    """Local account for the configured private key, or None to use the node's account"""
    if not settings.private_key:
        return None

    account = Account.from_key(settings.private_key)
    logger.info(f"Deploying from: {account.address}")
    return account
