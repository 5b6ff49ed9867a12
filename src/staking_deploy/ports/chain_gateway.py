from abc import ABC, abstractmethod
from typing import Any, Dict, List

class ChainGateway(ABC):
    """The node a module is deployed to."""
    @abstractmethod
    def accounts(self) -> List[str]: ...
    @abstractmethod
    def chain_id(self) -> int: ...
    @abstractmethod
    def send_deployment(self, data: str, sender: str) -> str: ...
    @abstractmethod
    def wait_for_receipt(self, tx_hash: str) -> Dict[str, Any]: ...
