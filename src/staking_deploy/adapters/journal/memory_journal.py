from typing import Dict, Optional
from ...ports.journal import DeploymentJournal
from ...domain.models import DeployedContract

class MemoryJournal(DeploymentJournal):
    def __init__(self):
        self._db: Dict[str, DeployedContract] = {}

    def load(self, future_id: str) -> Optional[DeployedContract]:
        return self._db.get(future_id)

    def save(self, record: DeployedContract) -> None:
        self._db[record.future_id] = record

    def addresses(self) -> Dict[str, str]:
        return {k: v.address for k, v in self._db.items()}
