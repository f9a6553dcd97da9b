"""
Models for deployment domain.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Any
from enum import Enum


class DeploymentStatus(Enum):
    """Status of deployment"""
    SUCCESS = "success"
    ROLLOUT_TIMED_OUT = "rollout_timed_out"
    FAILED = "failed"


@dataclass
class DeploymentResult:
    """Result of applying an image to a deployment"""
    deployment: str
    directory: str
    image: str
    status: DeploymentStatus
    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.status != DeploymentStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        result = asdict(self)
        result['status'] = self.status.value
        return result
