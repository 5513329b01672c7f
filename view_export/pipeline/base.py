"""
Pipeline Base Classes.

Pattern:
- StepInterface (abstract)
- Concrete steps implement it and report a StepResult
- Collaborators (CLI) render StepResult; steps never print
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class StepStatus(Enum):
    """Status of a pipeline step."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class StepResult:
    """Standardized result from a pipeline step."""

    step_name: str
    status: StepStatus
    data: Any = None
    message: str = ""
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == StepStatus.SUCCESS

    @property
    def failed(self) -> bool:
        return self.status == StepStatus.FAILED


class StepInterface(ABC):
    """Abstract interface for pipeline steps."""

    name: str = "step"

    @abstractmethod
    def execute(self, context: Any) -> StepResult:
        """Execute the step."""
        pass

    @abstractmethod
    def validate(self, context: Any) -> bool:
        """Validate context before execution."""
        pass

    @abstractmethod
    def get_step_info(self) -> Dict[str, Any]:
        """Get step metadata."""
        pass
