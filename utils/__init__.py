"""
Utilities Package
RPC client management
"""

from .rpc_manager import RPCManager

__all__ = ['RPCManager']
