from typing import Any, Dict, Optional
from ..modules.registry import load_module
from ..services.deploy.module_deployment import ModuleDeploymentService

def _summarize(c) -> Dict[str, Any]:
    return {
        "future_id": c.future_id,
        "contract": c.contract_name,
        "address": c.address,
        "tx_hash": c.tx_hash,
        "block_number": c.block_number,
        "args": list(c.args),
        "reused": c.reused,
    }

def run(module_id: str, service: ModuleDeploymentService, sender: Optional[str] = None) -> Dict[str, Any]:
    module = load_module(module_id)
    results = service.deploy(module, sender=sender)
    return {
        "module": module.id,
        "contracts": {name: _summarize(c) for name, c in results.items()},
        "deployed_addresses": service.journal.addresses(),
    }
