from ..domain.module_builder import ModuleBuilder, build_module

def define(m: ModuleBuilder):
    token_a = m.contract("TokenA", [], force=True)
    return {"tokenA": token_a}

TokenAModule = build_module("TokenAModule", define)
