"""
AshNFT Deployer
Deploys the contract, echoes its on-chain metadata and publishes the address
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from eth_utils import to_checksum_address
from web3 import Web3

from ashnft_deploy.config import DeployConfig
from ashnft_deploy.contract_integration import (
    ContractArtifact,
    ContractIntegration,
    ContractMetadata,
    DeploymentError,
    load_abi_and_bytecode,
)
from ashnft_deploy.env_file import ADDRESS_ENV_KEY, update_frontend_env_file
from ashnft_deploy.notifications import SlackNotifier

logger = logging.getLogger(__name__)


class DeploymentIntegrityError(DeploymentError):
    """Deployed state does not match the constructor arguments."""


@dataclass
class DeploymentResult:
    address: str
    metadata: ContractMetadata
    mismatches: List[str] = field(default_factory=list)
    env_updated: bool = False


def verify_metadata(metadata: ContractMetadata, expected_owner: str, expected_max_supply: int) -> List[str]:
    """Compare queried state with what was passed to the constructor"""
    mismatches = []
    if to_checksum_address(metadata.owner) != to_checksum_address(expected_owner):
        mismatches.append(f"owner is {metadata.owner}, expected {expected_owner}")
    if int(metadata.max_supply) != int(expected_max_supply):
        mismatches.append(f"maxSupply is {metadata.max_supply}, expected {expected_max_supply}")
    return mismatches


class AshNFTDeployer:
    def __init__(self, config: DeployConfig,
                 integration: Optional[ContractIntegration] = None,
                 notifier: Optional[SlackNotifier] = None):
        self.config = config
        self.integration = integration or ContractIntegration(config.rpc_url)
        self.notifier = notifier or SlackNotifier(config.slack_webhook)

    def load_artifact(self) -> ContractArtifact:
        if self.config.abi_path and self.config.bytecode_path:
            return load_abi_and_bytecode(
                self.config.contract_name, self.config.abi_path, self.config.bytecode_path
            )
        return self.integration.get_contract_factory(self.config.contract_name, self.config.artifacts_dir)

    async def deploy(self) -> DeploymentResult:
        """Deploy AshNFT and print the deployed contract's metadata"""
        await self.integration.initialize(self.config.private_key)

        deployer = self.integration.get_signer_address()
        print("Deployer address:", deployer)
        balance = await self.integration.get_balance(deployer)
        print("Deployer balance:", f"{balance} wei ({format_balance(balance)})")

        print(f"\nDeploying {self.config.contract_name} contract...")
        artifact = self.load_artifact()
        owner = to_checksum_address(self.config.owner or deployer)
        address = await self.integration.deploy(artifact, owner, self.config.max_supply)
        print(f"{self.config.contract_name} deployed at:", address)

        metadata = await self.integration.query_metadata(artifact, address)
        print("Contract name:", metadata.name)
        print("Contract symbol:", metadata.symbol)
        print("Max supply:", str(metadata.max_supply))
        print("Contract owner:", metadata.owner)

        mismatches = verify_metadata(metadata, owner, self.config.max_supply)
        for mismatch in mismatches:
            logger.warning(f"Deployed state mismatch: {mismatch}")
        if mismatches and self.config.strict:
            raise DeploymentIntegrityError("; ".join(mismatches))

        return DeploymentResult(address=address, metadata=metadata, mismatches=mismatches)

    async def run(self) -> DeploymentResult:
        """Full flow: deploy, publish the address, notify"""
        result = await self.deploy()

        print("\n--- Contract address (update your .env.local) ---")
        print(f"{ADDRESS_ENV_KEY}={result.address}")

        if self.config.update_env:
            result.env_updated = update_frontend_env_file(result.address, self.config.env_file)
            if result.env_updated:
                print("Frontend env file updated")

        await self.notifier.send(
            f"{result.metadata.name} ({result.metadata.symbol}) deployed\n"
            f"Address: `{result.address}`\n"
            f"Max supply: {result.metadata.max_supply}\n"
            f"Network: {self.config.rpc_url}",
            "warning" if result.mismatches else "good",
        )

        print("\nDeployment complete!")
        return result


def format_balance(wei: int) -> str:
    return f"{Web3.from_wei(wei, 'ether')} ETH"
