"""
Deployment system for built images.
Handles rolling out new image tags to Kubernetes deployments.
"""

from .models import DeploymentResult, DeploymentStatus
from .service import DeploymentService

__all__ = [
    'DeploymentResult',
    'DeploymentStatus',
    'DeploymentService',
]
