"""
Error taxonomy for build and deploy runs.
"""
from typing import Optional


class DeployToolError(Exception):
    """Base class for all fatal run errors"""

    category = "error"

    def __init__(self, message: str, target: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.target = target
        self.outcome = None  # RunOutcome, attached by the release manager

    def describe(self) -> str:
        """Human readable one-liner with category and offending item"""
        if self.target:
            return f"[{self.category}] {self.target}: {self.message}"
        return f"[{self.category}] {self.message}"


class PrerequisiteError(DeployToolError):
    """Missing tool, directory or build descriptor. Raised before any mutation."""

    category = "prerequisite"


class ConfigurationError(PrerequisiteError):
    """Static configuration is malformed"""

    category = "configuration"


class BuildError(DeployToolError):
    """Build or push of an image failed"""

    category = "build"

    def __init__(self, message: str, directory: str):
        super().__init__(message, target=directory)
        self.directory = directory


class DeployError(DeployToolError):
    """Applying a new image to a deployment failed"""

    category = "deploy"

    def __init__(self, message: str, deployment: str):
        super().__init__(message, target=deployment)
        self.deployment = deployment


class PersistenceError(DeployToolError):
    """The fingerprint store could not be written or removed"""

    category = "persistence"

    def __init__(self, message: str, path: str):
        super().__init__(message, target=path)
        self.path = path
