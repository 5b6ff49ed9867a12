# src/staking_deploy/modules/registry.py
import importlib
import sys
from typing import List
from ..domain.models import Module
from ..errors import UnknownModuleError

# module id -> (python module, attribute)
_MODULES = {
    "StakingModule": ("staking_deploy.modules.staking", "StakingModule"),
    "TokenAModule": ("staking_deploy.modules.token_a", "TokenAModule"),
}

def available_modules() -> List[str]:
    return sorted(_MODULES)

def load_module(module_id: str, *, fresh: bool = True) -> Module:
    """
    Import the defining file and return its Module.

    With fresh=True the file is re-evaluated, so values read at definition
    time (clock, environment) reflect this invocation.
    """
    try:
        path, attr = _MODULES[module_id]
    except KeyError:
        raise UnknownModuleError(module_id) from None

    if fresh and path in sys.modules:
        mod = importlib.reload(sys.modules[path])
    else:
        mod = importlib.import_module(path)
    return getattr(mod, attr)
