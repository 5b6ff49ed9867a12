# src/staking_deploy/adapters/chain/json_rpc_client.py
from typing import Any, List, Optional
import itertools
import httpx

class JsonRpcClient:
    """Minimal Ethereum JSON-RPC client (POST JSON to the node URL)."""
    def __init__(self, url: str, timeout: float = 15.0):
        self._url = url.rstrip("/")
        self._client = httpx.Client(timeout=timeout)
        self._ids = itertools.count(1)

    def request(self, method: str, params: Optional[List[Any]] = None,
                timeout: Optional[float] = None) -> httpx.Response:
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params or []}
        return self._client.post(self._url, json=payload, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self): return self
    def __exit__(self, exc_type, exc, tb): self.close()
