# src/staking_deploy/domain/module_builder.py
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence
from .models import ContractFuture, Module
from ..errors import ModuleDefinitionError

class ModuleBuilder:
    """Handed to a module's define callback; collects contract futures."""
    def __init__(self, module_id: str):
        self.module_id = module_id
        self._futures: List[ContractFuture] = []
        self._ids = set()

    def contract(
        self,
        contract_name: str,
        args: Sequence[Any] = (),
        *,
        force: bool = False,
        id: Optional[str] = None,
    ) -> ContractFuture:
        local_id = id or contract_name
        future_id = f"{self.module_id}#{local_id}"
        if future_id in self._ids:
            raise ModuleDefinitionError(f"duplicate future id {future_id!r}")

        fut = ContractFuture(
            id=future_id,
            module_id=self.module_id,
            contract_name=contract_name,
            args=tuple(args),
            force=bool(force),
        )
        self._futures.append(fut)
        self._ids.add(future_id)
        return fut

    def owns(self, fut: Any) -> bool:
        return isinstance(fut, ContractFuture) and fut.id in self._ids

    @property
    def futures(self) -> List[ContractFuture]:
        return list(self._futures)


def build_module(module_id: str, define: Callable[[ModuleBuilder], Mapping[str, ContractFuture]]) -> Module:
    """
    Evaluate `define` once against a fresh builder and freeze the outcome.

    The callback returns the module's results, e.g. {"staking": fut}; each
    value must be a future it registered on this builder.
    """
    if not module_id:
        raise ModuleDefinitionError("module id must be a non-empty string")

    m = ModuleBuilder(module_id)
    results = define(m)
    if not isinstance(results, Mapping):
        raise ModuleDefinitionError(f"{module_id}: define must return a mapping of futures")

    out: Dict[str, ContractFuture] = {}
    for name, fut in results.items():
        if not m.owns(fut):
            raise ModuleDefinitionError(f"{module_id}: result {name!r} is not a future of this module")
        out[name] = fut

    return Module(id=module_id, futures=tuple(m.futures), results=out)
