"""Deployment tooling for the AshNFT contract."""

from .contract_integration import (
    ArtifactNotFoundError,
    ContractArtifact,
    ContractIntegration,
    ContractMetadata,
    DeploymentError,
    NodeConnectionError,
    TransactionFailedError,
)
from .deployer import AshNFTDeployer, DeploymentIntegrityError, DeploymentResult, verify_metadata
from .env_file import ADDRESS_ENV_KEY, update_env_content, update_env_file, update_frontend_env_file

__all__ = [
    "ADDRESS_ENV_KEY",
    "ArtifactNotFoundError",
    "AshNFTDeployer",
    "ContractArtifact",
    "ContractIntegration",
    "ContractMetadata",
    "DeploymentError",
    "DeploymentIntegrityError",
    "DeploymentResult",
    "NodeConnectionError",
    "TransactionFailedError",
    "update_env_content",
    "update_env_file",
    "update_frontend_env_file",
    "verify_metadata",
]
