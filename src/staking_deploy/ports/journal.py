# src/staking_deploy/ports/journal.py
from abc import ABC, abstractmethod
from typing import Dict, Optional
from ..domain.models import DeployedContract

class DeploymentJournal(ABC):
    """Remembers which futures already went on-chain (per chain)."""
    @abstractmethod
    def load(self, future_id: str) -> Optional[DeployedContract]: ...
    @abstractmethod
    def save(self, record: DeployedContract) -> None: ...
    @abstractmethod
    def addresses(self) -> Dict[str, str]: ...
