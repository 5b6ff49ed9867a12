import os
import time
from ..domain.module_builder import ModuleBuilder, build_module

def define(m: ModuleBuilder):
    current_time = int(time.time())
    staking = m.contract("Staking", [
        current_time,
        os.environ.get("TOKEN_ADDRESS"),
    ])
    return {"staking": staking}

StakingModule = build_module("StakingModule", define)
