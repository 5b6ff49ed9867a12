# src/staking_deploy/adapters/journal/file_journal.py
import json, logging, os
from pathlib import Path
from typing import Any, Dict, Optional
from ...ports.journal import DeploymentJournal
from ...domain.models import DeployedContract, plain_args

ADDRESSES_FILE = "deployed_addresses.json"
JOURNAL_FILE = "journal.json"

class FileJournal(DeploymentJournal):
    """
    Journal kept on disk under <root>/chain-<chain_id>/:
      deployed_addresses.json  future id -> address
      journal.json             future id -> full record
    """
    def __init__(self, root: Path, chain_id: int):
        self.dir = Path(root) / f"chain-{int(chain_id)}"
        self._records: Dict[str, DeployedContract] = self._read()

    def _read(self) -> Dict[str, DeployedContract]:
        path = self.dir / JOURNAL_FILE
        if not path.is_file():
            return {}
        raw = json.loads(path.read_text(encoding="utf-8")) or {}
        return {fid: _from_json(fid, rec) for fid, rec in raw.items()}

    def load(self, future_id: str) -> Optional[DeployedContract]:
        return self._records.get(future_id)

    def save(self, record: DeployedContract) -> None:
        self._records[record.future_id] = record
        self.dir.mkdir(parents=True, exist_ok=True)
        _write_atomic(self.dir / JOURNAL_FILE, {k: _to_json(v) for k, v in self._records.items()})
        _write_atomic(self.dir / ADDRESSES_FILE, self.addresses())
        logging.debug("journal=%s saved future=%s", self.dir, record.future_id)

    def addresses(self) -> Dict[str, str]:
        return {k: v.address for k, v in self._records.items()}


def _to_json(r: DeployedContract) -> Dict[str, Any]:
    return {
        "contract_name": r.contract_name,
        "address": r.address,
        "tx_hash": r.tx_hash,
        "block_number": r.block_number,
        "args": list(plain_args(r.args)),
    }

def _from_json(future_id: str, d: Dict[str, Any]) -> DeployedContract:
    return DeployedContract(
        future_id=future_id,
        contract_name=d["contract_name"],
        address=d["address"],
        tx_hash=d.get("tx_hash"),
        block_number=d.get("block_number"),
        args=tuple(d.get("args") or ()),
    )

def _write_atomic(path: Path, data: Dict[str, Any]) -> None:
    # a crash leaves either the old file or the new one, never half of it
    tmp = path.with_name(path.name + ".tmp")
    with tmp.open("w", encoding="utf-8") as fh:
        fh.write(json.dumps(data, indent=2) + "\n")
        fh.flush()
        os.fsync(fh.fileno())
    tmp.replace(path)
