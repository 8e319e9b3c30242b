"""
Utilities Package
Network configuration and RPC connection
"""

from .rpc_manager import RPCManager

__all__ = ['RPCManager']
