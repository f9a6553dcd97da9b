"""Test cases for DockerImageBuilder - docker build/push invocation."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from deploytool.build.docker import DockerImageBuilder
from deploytool.config.global_config_loader import DockerConfig, ProjectConfig
from deploytool.utils.command_runner import CommandResult


@pytest.fixture
def project():
    return ProjectConfig(
        directory="request",
        deployment="request-service",
        image_name="request",
        container="request-service"
    )


@pytest.fixture
def builder():
    return DockerImageBuilder(DockerConfig(), "localhost:5000/")


def ok(args):
    return CommandResult(args=list(args), returncode=0)


class TestImageReference:

    def test_reference_uses_registry_name_and_tag(self, builder, project):
        assert builder.image_reference(project, "abc123") == "localhost:5000/request:abc123"

    def test_build_command_defaults(self, builder):
        command = builder.build_command(Path("/src/request"), "localhost:5000/request:t")

        assert command == ["docker", "build", "-t", "localhost:5000/request:t", "/src/request/"]

    def test_build_command_with_dockerfile_and_build_args(self):
        config = DockerConfig(dockerfile="Dockerfile.prod", build_args={"B": "2", "A": "1"})
        builder = DockerImageBuilder(config, "reg")

        command = builder.build_command(Path("/src/api"), "reg/api:t")

        assert command == [
            "docker", "build", "-t", "reg/api:t",
            "-f", "/src/api/Dockerfile.prod",
            "--build-arg", "A=1",
            "--build-arg", "B=2",
            "/src/api/",
        ]


class TestBuildAndPush:

    @pytest.mark.asyncio
    async def test_success_runs_build_then_push(self, builder, project):
        with patch('deploytool.build.docker.run_command', new_callable=AsyncMock) as mock_run:
            mock_run.side_effect = lambda args, timeout=None: ok(args)

            result = await builder.build_and_push(project, Path("/src/request"), "t1")

        assert result.success
        assert result.image == "localhost:5000/request:t1"
        assert [call.args[0][1] for call in mock_run.await_args_list] == ["build", "push"]
        assert mock_run.await_args_list[1].args[0] == ["docker", "push", "localhost:5000/request:t1"]

    @pytest.mark.asyncio
    async def test_build_failure_skips_push(self, builder, project):
        with patch('deploytool.build.docker.run_command', new_callable=AsyncMock) as mock_run:
            mock_run.return_value = CommandResult(args=["docker"], returncode=1, stderr="no space left")

            result = await builder.build_and_push(project, Path("/src/request"), "t1")

        assert not result.success
        assert "docker build failed" in result.error
        assert "no space left" in result.error
        assert mock_run.await_count == 1

    @pytest.mark.asyncio
    async def test_push_failure(self, builder, project):
        results = [
            CommandResult(args=["docker"], returncode=0),
            CommandResult(args=["docker"], returncode=1, stderr="connection refused"),
        ]

        with patch('deploytool.build.docker.run_command', new_callable=AsyncMock) as mock_run:
            mock_run.side_effect = results

            result = await builder.build_and_push(project, Path("/src/request"), "t1")

        assert not result.success
        assert "docker push failed" in result.error

    @pytest.mark.asyncio
    async def test_missing_docker_binary(self, builder, project):
        with patch('deploytool.build.docker.run_command', new_callable=AsyncMock) as mock_run:
            mock_run.side_effect = FileNotFoundError("Executable 'docker' was not found on PATH")

            result = await builder.build_and_push(project, Path("/src/request"), "t1")

        assert not result.success
        assert "not found" in result.error
