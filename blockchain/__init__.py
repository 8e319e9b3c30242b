"""
Blockchain Interaction Package
Handles artifact loading, deployment transaction building, and contract creation
"""

from .errors import DeploymentError
from .artifact import Artifact, load_artifact, artifact_path
from .transaction_builder import TransactionBuilder
from .contract_factory import ContractFactory, DeploymentResult

__all__ = [
    'DeploymentError',
    'Artifact',
    'load_artifact',
    'artifact_path',
    'TransactionBuilder',
    'ContractFactory',
    'DeploymentResult'
]
