"""
Blockchain Deployment Package
Handles contract blueprint lookup, deployment, and network settings
"""

from .contract_factory import (
    ContractFactory,
    DeployedContract,
    ArtifactNotFoundError,
    DeploymentError,
    get_contract_factory,
    load_artifact,
)
from .network import NetworkSettings, load_settings, connect, load_signer
from .deployment import deploy_token, main

__all__ = [
    'ContractFactory',
    'DeployedContract',
    'ArtifactNotFoundError',
    'DeploymentError',
    'get_contract_factory',
    'load_artifact',
    'NetworkSettings',
    'load_settings',
    'connect',
    'load_signer',
    'deploy_token',
    'main'
]
