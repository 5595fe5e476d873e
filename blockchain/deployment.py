"""
Token Deployment
Deploys a token contract with the fixed constructor arguments and reports the address
"""

import asyncio
import sys
from typing import Optional
from web3 import Web3
from loguru import logger

from .contract_factory import get_contract_factory
from .network import NetworkSettings, load_settings, connect, load_signer

# Constructor arguments: owner address placeholder and initial supply
OWNER_ADDRESS = "0xx"
INITIAL_SUPPLY = 100000000000000000000000000
TOKEN_CONSTRUCTOR_ARGS = (OWNER_ADDRESS, INITIAL_SUPPLY)


def configure_logging(settings: NetworkSettings):
    """Send logs to stderr, plus a rotating file when LOG_FILE is set"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=settings.log_level
    )

    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


async def deploy_token(
    contract_name: str,
    w3: Optional[Web3] = None,
    settings: Optional[NetworkSettings] = None
) -> str:
    """
    Deploy a token contract

    Args:
        contract_name: Name of the compiled contract
        w3: Web3 instance (None = connect using settings)
        settings: Network settings (None = load from environment)

    Returns:
        Deployed contract address
    """
    settings = settings or load_settings()
    w3 = w3 or connect(settings)

    logger.info(f"Deploying {contract_name}...")

    factory = get_contract_factory(
        w3,
        contract_name,
        signer=load_signer(settings),
        artifacts_dir=settings.artifacts_dir,
        chain_id=settings.chain_id
    )

    deployed = factory.deploy(*TOKEN_CONSTRUCTOR_ARGS)
    await deployed.wait_for_deployment(timeout=settings.timeout)

    return deployed.address


def main(contract_name: str) -> int:
    """
    Script entry point

    Args:
        contract_name: Name of the compiled contract

    Returns:
        Process exit code (0 = deployed, 1 = any error)
    """
    try:
        settings = load_settings()
        configure_logging(settings)

        address = asyncio.run(deploy_token(contract_name, settings=settings))
    except Exception as e:
        logger.error(f"Deployment of {contract_name} failed: {e}")
        return 1

    print(f"Contract deployed to: {address}")
    return 0
