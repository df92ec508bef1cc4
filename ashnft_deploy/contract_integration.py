"""
Contract Integration Module
Handles deployment of and read-only queries against the AshNFT contract
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from eth_account import Account
from eth_utils import to_checksum_address
from web3 import Web3

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "http://127.0.0.1:8545"


class DeploymentError(Exception):
    """Raised when the contract cannot be deployed or queried."""


class ArtifactNotFoundError(DeploymentError):
    pass


class NodeConnectionError(DeploymentError):
    pass


class TransactionFailedError(DeploymentError):
    pass


@dataclass
class ContractArtifact:
    contract_name: str
    abi: List[Dict[str, Any]]
    bytecode: str


@dataclass
class ContractMetadata:
    name: str
    symbol: str
    max_supply: int
    owner: str


def load_artifact_file(path: Path) -> ContractArtifact:
    """Load a Hardhat artifact JSON file"""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    try:
        abi = data["abi"]
        bytecode = data["bytecode"]
    except KeyError as e:
        raise ArtifactNotFoundError(f"Artifact {path} is missing {e}") from e
    name = data.get("contractName") or Path(path).stem
    return ContractArtifact(contract_name=name, abi=abi, bytecode=bytecode)


def find_artifact(name: str, artifacts_dir: Path) -> Path:
    """Locate ``<name>.json`` below a Hardhat artifacts directory."""
    artifacts_dir = Path(artifacts_dir)
    if not artifacts_dir.is_dir():
        raise ArtifactNotFoundError(
            f"Artifacts directory not found: {artifacts_dir} (run `npx hardhat compile` first)"
        )

    matches = sorted(
        p for p in artifacts_dir.rglob(f"{name}.json") if not p.name.endswith(".dbg.json")
    )
    if not matches:
        raise ArtifactNotFoundError(f"No artifact for {name} under {artifacts_dir}")
    if len(matches) > 1:
        logger.warning(f"Multiple artifacts found for {name}, using {matches[0]}")
    return matches[0]


def load_abi_and_bytecode(name: str, abi_path: Path, bytecode_path: Path) -> ContractArtifact:
    """Build an artifact from a separate ``.abi.json`` and ``.bin`` pair"""
    abi = json.loads(Path(abi_path).read_text(encoding="utf-8"))
    bytecode = Path(bytecode_path).read_text(encoding="utf-8").strip()
    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode
    return ContractArtifact(contract_name=name, abi=abi, bytecode=bytecode)


class ContractIntegration:
    def __init__(self, rpc_url: str = DEFAULT_RPC_URL, web3: Optional[Web3] = None):
        self.rpc_url = rpc_url
        self.web3 = web3
        self.account = None
        self.signer_address: Optional[str] = None

    async def initialize(self, private_key: Optional[str] = None):
        """Initialize Web3 connection and signer"""
        try:
            if self.web3 is None:
                self.web3 = Web3(Web3.HTTPProvider(self.rpc_url))
            if not self.web3.is_connected():
                raise NodeConnectionError(f"Failed to connect to {self.rpc_url}")

            if private_key:
                self.account = Account.from_key(private_key)
                self.signer_address = self.account.address
            else:
                # Same as the first signer a Hardhat node hands out
                accounts = self.web3.eth.accounts
                if not accounts:
                    raise DeploymentError(
                        "No unlocked accounts on the node; set PRIVATE_KEY to deploy"
                    )
                self.signer_address = to_checksum_address(accounts[0])

            self.web3.eth.default_account = self.signer_address

            logger.info(f"Contract integration initialized for {self.rpc_url}")
            logger.info(f"Signer: {self.signer_address}")

        except Exception as e:
            logger.error(f"Failed to initialize contract integration: {e}")
            raise

    def get_signer_address(self) -> str:
        if self.signer_address is None:
            raise DeploymentError("Contract integration not initialized")
        return self.signer_address

    async def get_balance(self, address: Optional[str] = None) -> int:
        """Get native balance in wei"""
        try:
            target = to_checksum_address(address or self.get_signer_address())
            return self.web3.eth.get_balance(target)
        except Exception as e:
            logger.error(f"Failed to get balance: {e}")
            raise

    def get_contract_factory(self, name: str, artifacts_dir: Path) -> ContractArtifact:
        """Load the compiled contract so it can be deployed"""
        artifact = load_artifact_file(find_artifact(name, artifacts_dir))
        logger.info(f"Loaded artifact for {artifact.contract_name}")
        return artifact

    async def deploy(self, artifact: ContractArtifact, *constructor_args) -> str:
        """Deploy a contract and wait for the receipt, returning its address"""
        try:
            factory = self.web3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
            constructor = factory.constructor(*constructor_args)

            if self.account is not None:
                tx = constructor.build_transaction({
                    "from": self.account.address,
                    "nonce": self.web3.eth.get_transaction_count(self.account.address),
                    "chainId": self.web3.eth.chain_id,
                })
                signed_tx = self.account.sign_transaction(tx)
                tx_hash = self.web3.eth.send_raw_transaction(signed_tx.raw_transaction)
            else:
                tx_hash = constructor.transact({"from": self.signer_address})

            logger.info(f"Deployment transaction sent: {Web3.to_hex(tx_hash)}")

            receipt = self.web3.eth.wait_for_transaction_receipt(tx_hash)

            if receipt["status"] != 1:
                raise TransactionFailedError(
                    f"Deployment of {artifact.contract_name} reverted: {Web3.to_hex(tx_hash)}"
                )
            if not receipt["contractAddress"]:
                raise TransactionFailedError(
                    f"Receipt for {Web3.to_hex(tx_hash)} has no contract address"
                )

            address = to_checksum_address(receipt["contractAddress"])
            logger.info(f"{artifact.contract_name} deployed at {address}")
            return address

        except Exception as e:
            logger.error(f"Failed to deploy {artifact.contract_name}: {e}")
            raise

    def get_contract_at(self, artifact: ContractArtifact, address: str):
        return self.web3.eth.contract(address=to_checksum_address(address), abi=artifact.abi)

    async def query_metadata(self, artifact: ContractArtifact, address: str) -> ContractMetadata:
        """Read name, symbol, supply cap and owner from a deployed instance"""
        try:
            contract = self.get_contract_at(artifact, address)
            return ContractMetadata(
                name=contract.functions.NAME().call(),
                symbol=contract.functions.SYMBOL().call(),
                max_supply=contract.functions.maxSupply().call(),
                owner=contract.functions.owner().call(),
            )
        except Exception as e:
            logger.error(f"Failed to query contract metadata: {e}")
            raise
