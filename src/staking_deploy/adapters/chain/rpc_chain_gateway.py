# src/staking_deploy/adapters/chain/rpc_chain_gateway.py
import json, random, time, logging
import httpx
from typing import Any, Dict, List, Optional
from ...ports.chain_gateway import ChainGateway
from ...errors import RpcRequestError
from .json_rpc_client import JsonRpcClient

RETRY_STATUSES = {403, 407, 429, 500, 502, 503, 504}

class RpcChainGateway(ChainGateway):
    def __init__(
        self,
        client: JsonRpcClient,
        *,
        retries: int = 5,
        timeout_sec: float = 15.0,
        tol_sleep_cap: float = 5.0,
        receipt_timeout_sec: float = 120.0,
        poll_interval_sec: float = 1.0,
        sleep=time.sleep,
        clock=time.monotonic,
    ):
        self.client = client
        self.retries = retries
        self.timeout_sec = timeout_sec
        self.tol_sleep_cap = tol_sleep_cap
        self.receipt_timeout_sec = receipt_timeout_sec
        self.poll_interval_sec = poll_interval_sec
        self._sleep = sleep
        self._clock = clock

    # ---------- low-level call with retries ----------
    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        last_err = None
        for a in range(self.retries):
            try:
                r = self.client.request(method, params, timeout=self.timeout_sec)
            except httpx.TransportError as e:
                last_err = str(e)
                logging.warning("rpc method=%s attempt=%d error=%s", method, a + 1, last_err)
                self._backoff(a)
                continue

            status = getattr(r, "status_code", None)
            if status in RETRY_STATUSES:
                last_err = f"http {status}"
                self._backoff(a)
                continue
            if status != 200:
                raise RpcRequestError(f"{method}: HTTP {status}: {str(r.text)[:200]}")

            try:
                body = json.loads(r.text)
            except ValueError:
                # proxies answer 200 with an html error page
                last_err = f"non-json body: {str(r.text)[:200]}"
                logging.warning("rpc method=%s attempt=%d error=%s", method, a + 1, last_err)
                self._backoff(a)
                continue
            if not isinstance(body, dict):
                raise RpcRequestError(f"{method}: unexpected response {str(r.text)[:200]}")
            err = body.get("error")
            if err:
                if isinstance(err, dict):
                    raise RpcRequestError(f"{method}: {err.get('code')} {err.get('message')}")
                raise RpcRequestError(f"{method}: {err}")
            return body.get("result")
        raise RpcRequestError(f"{method}: {last_err or 'request failed'}")

    def _backoff(self, attempt: int) -> None:
        if attempt >= self.retries - 1:
            return
        self._sleep(min(2 ** attempt, self.tol_sleep_cap) + random.random())

    # ---------- ChainGateway ----------
    def accounts(self) -> List[str]:
        return list(self.call("eth_accounts") or [])

    def chain_id(self) -> int:
        return int(self.call("eth_chainId"), 16)

    def send_deployment(self, data: str, sender: str) -> str:
        tx = {"from": sender, "data": data}
        gas = self.call("eth_estimateGas", [tx])
        tx["gas"] = gas
        return self.call("eth_sendTransaction", [tx])

    def wait_for_receipt(self, tx_hash: str) -> Dict[str, Any]:
        deadline = self._clock() + self.receipt_timeout_sec
        while True:
            receipt = self.call("eth_getTransactionReceipt", [tx_hash])
            if receipt:
                return receipt
            if self._clock() >= deadline:
                raise RpcRequestError(f"no receipt for {tx_hash} after {self.receipt_timeout_sec}s")
            self._sleep(self.poll_interval_sec)
