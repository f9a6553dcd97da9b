"""
deploytool - build changed directories into container images and roll them out

Main modules:
- build: Ignore rules, directory fingerprints, checksum store, change detection, docker builds
- deployment: Kubernetes rollouts
- config: Configuration loading
- cli: Command line interface
"""

from .build.manager import ReleaseManager
from .build.change_detector import ChangeDetector
from .build.hasher import DirectoryHasher
from .build.ignore import IgnoreMatcher, IgnoreRuleSet
from .build.store import FingerprintStore
from .config.global_config_loader import GlobalConfig, load_global_config

__version__ = "1.0.0"
__all__ = [
    'ReleaseManager',
    'ChangeDetector',
    'DirectoryHasher',
    'IgnoreMatcher',
    'IgnoreRuleSet',
    'FingerprintStore',
    'GlobalConfig',
    'load_global_config',
]
