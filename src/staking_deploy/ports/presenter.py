from abc import ABC, abstractmethod
from typing import Any, Dict

class Presenter(ABC):
    @abstractmethod
    def render(self, result: Dict[str, Any]) -> None: ...
