"""Pytest configuration and fixtures for deploytool tests."""

import sys
from pathlib import Path
from typing import Dict
from unittest.mock import AsyncMock, Mock, patch
import pytest
import logging

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from deploytool.build.docker import DockerImageBuilder
from deploytool.build.models import BuildResult
from deploytool.config.global_config_loader import GlobalConfig
from deploytool.deployment.models import DeploymentResult, DeploymentStatus
from deploytool.deployment.service import DeploymentService

# Configure logging
logging.basicConfig(level=logging.INFO)


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create files (relative POSIX path -> content) below root"""
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def make_tree(tmp_path):
    """Factory writing a directory tree under tmp_path"""
    def _make(name: str, files: Dict[str, str]) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        return write_tree(root, files)
    return _make


@pytest.fixture
def workspace(tmp_path):
    """Base directory holding svcA and svcB, each with a Dockerfile"""
    write_tree(tmp_path, {
        "svcA/Dockerfile": "FROM alpine\n",
        "svcA/app.py": "print('a')\n",
        "svcB/Dockerfile": "FROM alpine\n",
        "svcB/main.go": "package main\n",
    })
    return tmp_path


@pytest.fixture
def global_config(workspace) -> GlobalConfig:
    """Config for two projects in the workspace"""
    return GlobalConfig.from_dict({
        'registry': {'address': 'registry.local:5000'},
        'kubernetes': {'namespace': 'test-ns', 'rollout_timeout': 5},
        'build_system': {
            'base_dir': str(workspace),
            'directories': ['svcA', 'svcB'],
            'deployments': ['svc-a', 'svc-b'],
        }
    })


@pytest.fixture
def mock_builder():
    """Image builder whose builds always succeed"""
    builder = Mock(spec=DockerImageBuilder)

    async def build_and_push(project, directory, tag):
        return BuildResult(
            directory=project.directory,
            success=True,
            image=f"registry.local:5000/{project.image_name}:{tag}"
        )

    builder.build_and_push = AsyncMock(side_effect=build_and_push)
    return builder


@pytest.fixture
def mock_deployment_service():
    """Deployment service whose rollouts always converge"""
    service = Mock(spec=DeploymentService)

    async def deploy_project(project, image):
        return DeploymentResult(
            deployment=project.deployment,
            directory=project.directory,
            image=image,
            status=DeploymentStatus.SUCCESS
        )

    service.deploy_project = AsyncMock(side_effect=deploy_project)
    return service


@pytest.fixture
def tools_installed():
    """Pretend docker and kubectl are on PATH"""
    with patch('deploytool.build.manager.which', side_effect=lambda tool: f"/usr/bin/{tool}"):
        yield
