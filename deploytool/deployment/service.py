"""
Deployment service: points Kubernetes deployments at freshly pushed images.
"""
import logging
from typing import List, Optional

from ..config.global_config_loader import KubernetesConfig, ProjectConfig
from ..utils.command_runner import run_command
from .models import DeploymentResult, DeploymentStatus


# Extra seconds granted to kubectl beyond its own --timeout before it is killed
ROLLOUT_GRACE_SECONDS = 30


class DeploymentService:
    """
    Service for rolling out images with kubectl.
    Applies the image, then waits (bounded) for the rollout to converge.
    """

    def __init__(self, kubernetes_config: KubernetesConfig):
        """
        Initialize deployment service.

        Args:
            kubernetes_config: Kubernetes settings
        """
        self.kubernetes_config = kubernetes_config
        self.logger = logging.getLogger(__name__)

    @property
    def namespace(self) -> str:
        return self.kubernetes_config.namespace

    def _kubectl(self, *args: str) -> List[str]:
        command = [self.kubernetes_config.kubectl]
        if self.kubernetes_config.context:
            command.extend(["--context", self.kubernetes_config.context])
        command.extend(args)
        return command

    async def set_image(
        self,
        deployment: str,
        container: str,
        image: str,
        namespace: Optional[str] = None
    ) -> bool:
        """
        Update the container image of a deployment.

        Returns:
            True if kubectl accepted the change
        """
        namespace = namespace or self.namespace
        self.logger.info(f"Updating Kubernetes deployment {deployment}...")

        result = await run_command(self._kubectl(
            "set", "image", f"deployment/{deployment}",
            f"{container}={image}", "-n", namespace
        ))

        if not result.ok:
            self.logger.error(f"Failed to update deployment {deployment}: {result.error_summary()}")
            return False

        self.logger.info(f"Successfully updated deployment {deployment}")
        return True

    async def wait_for_rollout(
        self,
        deployment: str,
        namespace: Optional[str] = None,
        timeout: Optional[int] = None
    ) -> bool:
        """
        Wait for a rollout to complete.

        Args:
            deployment: Deployment name
            namespace: Namespace (configured namespace if omitted)
            timeout: Wait budget in seconds (configured rollout_timeout if omitted)

        Returns:
            True if the rollout converged, False if the wait ran out
        """
        namespace = namespace or self.namespace
        timeout = timeout or self.kubernetes_config.rollout_timeout

        self.logger.info("Waiting for rollout to complete...")
        result = await run_command(
            self._kubectl(
                "rollout", "status", f"deployment/{deployment}",
                "-n", namespace, f"--timeout={timeout}s"
            ),
            timeout=timeout + ROLLOUT_GRACE_SECONDS
        )

        if result.ok:
            self.logger.info(f"Rollout completed successfully for {deployment}")
            return True

        self.logger.warning(
            f"Rollout status check timed out for {deployment}: {result.error_summary()}"
        )
        return False

    async def deploy_project(self, project: ProjectConfig, image: str) -> DeploymentResult:
        """
        Apply an image to a project's deployment and wait for the rollout.

        A rollout that does not converge in time is reported as
        ROLLOUT_TIMED_OUT, not as a failure.

        Returns:
            DeploymentResult
        """
        self.logger.info(f"Updating deployment: {project.deployment} with image: {image}")

        try:
            applied = await self.set_image(project.deployment, project.container, image)
        except FileNotFoundError as e:
            self.logger.error(f"Failed to run kubectl for {project.deployment}: {e}")
            return DeploymentResult(
                deployment=project.deployment,
                directory=project.directory,
                image=image,
                status=DeploymentStatus.FAILED,
                error=str(e)
            )

        if not applied:
            return DeploymentResult(
                deployment=project.deployment,
                directory=project.directory,
                image=image,
                status=DeploymentStatus.FAILED,
                error=f"kubectl set image failed for deployment {project.deployment}"
            )

        converged = await self.wait_for_rollout(project.deployment)
        if not converged:
            return DeploymentResult(
                deployment=project.deployment,
                directory=project.directory,
                image=image,
                status=DeploymentStatus.ROLLOUT_TIMED_OUT,
                message=(
                    f"Rollout did not complete within {self.kubernetes_config.rollout_timeout}s; "
                    "it may still converge"
                )
            )

        return DeploymentResult(
            deployment=project.deployment,
            directory=project.directory,
            image=image,
            status=DeploymentStatus.SUCCESS,
            message="Rollout completed"
        )
