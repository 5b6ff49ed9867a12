# src/staking_deploy/config.py
import os
from typing import Optional
from pydantic import BaseModel, Field

class Config(BaseModel):
    rpc_url: str = Field(default_factory=lambda: os.getenv("RPC_URL", "http://127.0.0.1:8545"))
    rpc_timeout_sec: float = Field(default_factory=lambda: float(os.getenv("RPC_TIMEOUT_SEC", "15")))
    rpc_retries: int = Field(default_factory=lambda: int(os.getenv("RPC_RETRIES", "5")))
    receipt_timeout_sec: float = Field(default_factory=lambda: float(os.getenv("RECEIPT_TIMEOUT_SEC", "120")))
    artifacts_dir: str = Field(default_factory=lambda: os.getenv("ARTIFACTS_DIR", "artifacts"))
    deployments_dir: str = Field(default_factory=lambda: os.getenv("DEPLOYMENTS_DIR", "deployments"))
    # None -> first account reported by the node
    deployer_address: Optional[str] = Field(default_factory=lambda: os.getenv("DEPLOYER_ADDRESS") or None)

def load_config(**overrides) -> Config:
    return Config(**{k: v for k, v in overrides.items() if v is not None})
