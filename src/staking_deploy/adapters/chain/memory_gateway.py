# src/staking_deploy/adapters/chain/memory_gateway.py
import hashlib
from typing import Any, Dict, List, Optional
from ...ports.chain_gateway import ChainGateway

class MemoryChainGateway(ChainGateway):
    """Dry-run chain: records deployments, hands out deterministic addresses."""
    def __init__(self, accounts: Optional[List[str]] = None, chain_id: int = 31337,
                 revert_data: Optional[List[str]] = None):
        self._accounts = list(accounts) if accounts is not None else ["0x" + "f" * 40]
        self._chain_id = chain_id
        self._revert = set(revert_data or [])
        self.sent: List[Dict[str, Any]] = []
        self._receipts: Dict[str, Dict[str, Any]] = {}

    def accounts(self) -> List[str]:
        return list(self._accounts)

    def chain_id(self) -> int:
        return self._chain_id

    def send_deployment(self, data: str, sender: str) -> str:
        n = len(self.sent) + 1
        tx_hash = "0x" + hashlib.sha256(f"{sender}:{n}:{data}".encode()).hexdigest()
        address = "0x" + f"{n:040x}"
        self.sent.append({"from": sender, "data": data, "hash": tx_hash})
        self._receipts[tx_hash] = {
            "transactionHash": tx_hash,
            "contractAddress": address,
            "blockNumber": hex(n),
            "status": "0x0" if data in self._revert else "0x1",
        }
        return tx_hash

    def wait_for_receipt(self, tx_hash: str) -> Dict[str, Any]:
        return self._receipts[tx_hash]
