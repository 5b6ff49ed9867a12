class RpcRequestError(RuntimeError):
    pass

class NoAccountsError(RuntimeError):
    """Node exposes no unlocked accounts and no sender was given."""
    pass

class ArtifactNotFoundError(RuntimeError):
    pass

class AbiEncodingError(ValueError):
    """Constructor argument does not fit its ABI type."""
    pass

class DeploymentRevertedError(RuntimeError):
    """Receipt came back with status != 1."""
    pass

class ModuleDefinitionError(ValueError):
    pass

class UnknownModuleError(KeyError):
    pass

class ReconciliationError(RuntimeError):
    """Journaled future was recorded with different constructor arguments."""
    pass
