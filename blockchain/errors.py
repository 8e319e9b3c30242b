"""
Deployment Errors
"""


class DeploymentError(Exception):
    """Raised when a contract cannot be deployed (bad artifact, reverted or unconfirmed creation)"""
