from abc import ABC, abstractmethod
from ..domain.models import ContractArtifact

class ArtifactStore(ABC):
    @abstractmethod
    def load(self, contract_name: str) -> ContractArtifact: ...
