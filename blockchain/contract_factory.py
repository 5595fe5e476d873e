"""
Contract Factory
Resolves compiled contract blueprints and deploys them
"""

import asyncio
import json
from pathlib import Path
from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from .network import DEFAULT_ARTIFACTS_DIR, DEFAULT_TIMEOUT

GAS_LIMIT_BUFFER = 1.2  # 20% over the node's estimate
DEFAULT_GAS_LIMIT = 3000000


class ArtifactNotFoundError(FileNotFoundError):
    """Raised when no compiled artifact exists for a contract name"""


class DeploymentError(RuntimeError):
    """Raised when a deployment transaction cannot be sent or is reverted"""


def apply_gas_buffer(gas_estimate: int, buffer: float = GAS_LIMIT_BUFFER) -> int:
    """Gas limit with safety margin over the estimate"""
    return int(gas_estimate * buffer)


def load_artifact(contract_name: str, artifacts_dir: str = DEFAULT_ARTIFACTS_DIR) -> Dict:
    """
    Load a compiled contract artifact

    Looks at the Hardhat layout first
    (artifacts/contracts/<Name>.sol/<Name>.json), then anywhere under
    artifacts_dir for <Name>.json.

    Args:
        contract_name: Contract name as declared in the source
        artifacts_dir: Root of the compiled artifacts

    Returns:
        Artifact dict with 'abi' and 'bytecode'
    """
    root = Path(artifacts_dir)
    artifact_path = root / "contracts" / f"{contract_name}.sol" / f"{contract_name}.json"

    if not artifact_path.is_file():
        # Debug info files (*.dbg.json) never match the exact name
        matches = sorted(root.rglob(f"{contract_name}.json")) if root.is_dir() else []

        if not matches:
            raise ArtifactNotFoundError(
                f"Contract artifact not found for {contract_name} in {root} "
                "(run 'npx hardhat compile' first)"
            )

        if len(matches) > 1:
            logger.warning(f"Multiple artifacts found for {contract_name}, using {matches[0]}")

        artifact_path = matches[0]

    with open(artifact_path, 'r') as f:
        artifact = json.load(f)

    if 'abi' not in artifact or not artifact.get('bytecode') or artifact['bytecode'] == '0x':
        raise ValueError(f"Artifact {artifact_path} has no deployable bytecode")

    logger.debug(f"Loaded artifact: {artifact_path}")
    return artifact


class DeployedContract:
    """
    Handle for a contract whose deployment transaction has been sent
    """

    def __init__(self, w3: Web3, contract_name: str, abi, tx_hash):
        self.w3 = w3
        self.contract_name = contract_name
        self.abi = abi
        self.tx_hash = tx_hash

        # Set once the deployment is confirmed
        self.address: Optional[str] = None
        self.receipt = None
        self.contract = None

    async def wait_for_deployment(self, timeout: int = DEFAULT_TIMEOUT) -> "DeployedContract":
        """
        Wait until the deployment transaction is mined

        Args:
            timeout: Seconds to wait for the receipt

        Returns:
            self, with address, receipt and contract populated
        """
        logger.info("Waiting for confirmation...")

        receipt = await asyncio.to_thread(
            self.w3.eth.wait_for_transaction_receipt,
            self.tx_hash,
            timeout=timeout
        )

        if receipt['status'] != 1:
            raise DeploymentError(
                f"Deployment of {self.contract_name} reverted (tx {Web3.to_hex(self.tx_hash)})"
            )

        self.receipt = receipt
        self.address = receipt['contractAddress']
        self.contract = self.w3.eth.contract(address=self.address, abi=self.abi)

        logger.success(f"{self.contract_name} deployed at {self.address}")
        logger.info(f"Gas used: {receipt['gasUsed']}")
        return self


class ContractFactory:
    """
    Deploys instances of a single compiled contract
    """

    def __init__(
        self,
        w3: Web3,
        contract_name: str,
        abi,
        bytecode: str,
        signer=None,
        chain_id: Optional[int] = None
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            contract_name: Contract name
            abi: Contract ABI
            bytecode: Creation bytecode
            signer: Local account to sign with (None = node's default account)
            chain_id: Chain id for signed transactions (None = ask the node)
        """
        self.w3 = w3
        self.contract_name = contract_name
        self.abi = abi
        self.bytecode = bytecode
        self.signer = signer
        self.chain_id = chain_id

        self.contract_class = w3.eth.contract(abi=abi, bytecode=bytecode)

    def _sender(self) -> str:
        if self.signer is not None:
            return self.signer.address

        if self.w3.eth.default_account:
            return self.w3.eth.default_account

        accounts = self.w3.eth.accounts
        if not accounts:
            raise DeploymentError(
                "No signer available: set DEPLOYER_PRIVATE_KEY or use a node with unlocked accounts"
            )

        return accounts[0]

    def _estimate_gas_limit(self, constructor, sender: str) -> int:
        try:
            gas_estimate = constructor.estimate_gas({'from': sender})
            return apply_gas_buffer(gas_estimate)
        except Exception as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            return DEFAULT_GAS_LIMIT

    def deploy(self, *args) -> DeployedContract:
        """
        Send the deployment transaction

        Args:
            *args: Constructor arguments, passed through unchanged

        Returns:
            DeployedContract handle (call wait_for_deployment to confirm)
        """
        sender = Web3.to_checksum_address(self._sender())
        constructor = self.contract_class.constructor(*args)

        gas_limit = self._estimate_gas_limit(constructor, sender)
        logger.info(f"Gas limit: {gas_limit}")

        if self.signer is not None:
            gas_price = self.w3.eth.gas_price
            logger.info(f"Gas price: {self.w3.from_wei(gas_price, 'gwei')} gwei")

            transaction = constructor.build_transaction({
                'from': sender,
                'nonce': self.w3.eth.get_transaction_count(sender),
                'gas': gas_limit,
                'gasPrice': gas_price,
                'chainId': self.chain_id or self.w3.eth.chain_id
            })

            logger.info("Signing transaction...")
            signed_tx = self.signer.sign_transaction(transaction)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = constructor.transact({'from': sender, 'gas': gas_limit})

        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")
        return DeployedContract(self.w3, self.contract_name, self.abi, tx_hash)


def get_contract_factory(
    w3: Web3,
    contract_name: str,
    signer=None,
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR,
    chain_id: Optional[int] = None
) -> ContractFactory:
    """
    Resolve a contract blueprint by name

    Args:
        w3: Web3 instance
        contract_name: Contract name
        signer: Local account to deploy from (None = node's default account)
        artifacts_dir: Root of the compiled artifacts
        chain_id: Chain id override for signed transactions

    Returns:
        ContractFactory for the contract
    """
    artifact = load_artifact(contract_name, artifacts_dir)

    return ContractFactory(
        w3,
        contract_name,
        abi=artifact['abi'],
        bytecode=artifact['bytecode'],
        signer=signer,
        chain_id=chain_id
    )
