# src/staking_deploy/adapters/artifacts/hardhat_artifact_store.py
import json
from pathlib import Path
from typing import Dict, List
from ...ports.artifact_store import ArtifactStore
from ...domain.models import ContractArtifact
from ...errors import ArtifactNotFoundError

class HardhatArtifactStore(ArtifactStore):
    """Reads compiled artifacts from a Hardhat `artifacts/` tree."""
    def __init__(self, root: Path):
        self.root = Path(root)
        self._cache: Dict[str, ContractArtifact] = {}

    def _candidates(self, contract_name: str) -> List[Path]:
        # build-info/ and *.dbg.json are not contract artifacts
        return sorted(
            p for p in self.root.rglob(f"{contract_name}.json")
            if "build-info" not in p.parts
        )

    def load(self, contract_name: str) -> ContractArtifact:
        if contract_name in self._cache:
            return self._cache[contract_name]

        paths = self._candidates(contract_name)
        if not paths:
            raise ArtifactNotFoundError(f"no artifact for {contract_name!r} under {self.root}")
        if len(paths) > 1:
            raise ArtifactNotFoundError(
                f"ambiguous artifact for {contract_name!r}: {[str(p) for p in paths]}"
            )

        data = json.loads(paths[0].read_text(encoding="utf-8"))
        bytecode = data.get("bytecode") or ""
        if not bytecode or bytecode == "0x":
            raise ArtifactNotFoundError(f"{contract_name!r} has no creation bytecode (abstract/interface?)")
        if not bytecode.startswith("0x"):
            bytecode = "0x" + bytecode

        art = ContractArtifact(
            contract_name=data.get("contractName", contract_name),
            abi=list(data.get("abi") or []),
            bytecode=bytecode,
        )
        self._cache[contract_name] = art
        return art
