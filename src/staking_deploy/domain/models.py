from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

@dataclass(frozen=True)
class ContractFuture:
    """A contract instantiation registered by a module, not yet executed."""
    id: str                      # "<module_id>#<local id>"
    module_id: str
    contract_name: str
    args: Tuple[Any, ...] = ()   # forwarded verbatim to the constructor
    force: bool = False          # re-deploy even if the journal has it

@dataclass(frozen=True)
class Module:
    id: str
    futures: Tuple[ContractFuture, ...]
    results: Dict[str, ContractFuture] = field(default_factory=dict)

    def future(self, future_id: str) -> ContractFuture:
        for f in self.futures:
            if f.id == future_id:
                return f
        raise KeyError(future_id)

@dataclass(frozen=True)
class ContractArtifact:
    contract_name: str
    abi: List[Dict[str, Any]]
    bytecode: str                # 0x-prefixed creation code

    def constructor_inputs(self) -> List[Dict[str, Any]]:
        for entry in self.abi:
            if entry.get("type") == "constructor":
                return list(entry.get("inputs") or [])
        return []

@dataclass(frozen=True)
class DeployedContract:
    future_id: str
    contract_name: str
    address: str
    tx_hash: Optional[str] = None
    block_number: Optional[int] = None
    args: Tuple[Any, ...] = ()
    reused: bool = False

def plain_args(args) -> Tuple[Any, ...]:
    """Arguments as they are stored in a journal: bytes become 0x-hex."""
    out = []
    for a in args:
        if isinstance(a, (bytes, bytearray)):
            out.append("0x" + bytes(a).hex())
        elif isinstance(a, (list, tuple)):
            out.append(plain_args(a))
        else:
            out.append(a)
    return tuple(out)
