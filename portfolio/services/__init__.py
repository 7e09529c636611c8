"""Service layer: access to the remote content API."""

from .rpc_client import RpcClient, get_rpc_client

__all__ = ["RpcClient", "get_rpc_client"]
