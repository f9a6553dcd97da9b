"""
Core error types shared by the build and deployment packages.
"""

from .exceptions import (
    DeployToolError,
    PrerequisiteError,
    ConfigurationError,
    BuildError,
    DeployError,
    PersistenceError
)

__all__ = [
    'DeployToolError',
    'PrerequisiteError',
    'ConfigurationError',
    'BuildError',
    'DeployError',
    'PersistenceError',
]
