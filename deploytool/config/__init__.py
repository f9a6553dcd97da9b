"""
Configuration loading for deploytool.
"""

from .global_config_loader import (
    GlobalConfig,
    RegistryConfig,
    KubernetesConfig,
    DockerConfig,
    BuildSystemConfig,
    ProjectConfig,
    load_global_config
)

__all__ = [
    'GlobalConfig',
    'RegistryConfig',
    'KubernetesConfig',
    'DockerConfig',
    'BuildSystemConfig',
    'ProjectConfig',
    'load_global_config',
]
