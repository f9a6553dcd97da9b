import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field

from ..core.exceptions import ConfigurationError


@dataclass
class RegistryConfig:
    """Container registry configuration"""
    address: str = "localhost:5000"


@dataclass
class KubernetesConfig:
    """Kubernetes configuration"""
    namespace: str = "vercel-clone"
    kubectl: str = "kubectl"
    context: Optional[str] = None
    rollout_timeout: int = 300  # seconds; exceeding it is only a warning


@dataclass
class DockerConfig:
    """Docker configuration"""
    docker: str = "docker"
    dockerfile: str = "Dockerfile"
    build_args: Dict[str, str] = field(default_factory=dict)


@dataclass
class ProjectConfig:
    """One project directory and the deployment it feeds"""
    directory: str
    deployment: str
    image_name: str
    container: str


@dataclass
class BuildSystemConfig:
    """Build system configuration"""
    directories: List[str] = field(default_factory=lambda: ["deploy", "request", "upload"])
    deployments: List[str] = field(
        default_factory=lambda: ["deploy-service", "request-service", "upload-service"]
    )
    images: Dict[str, str] = field(default_factory=dict)  # directory -> image name
    containers: Dict[str, str] = field(default_factory=dict)  # directory -> container name
    base_dir: str = "."
    checksum_file: str = ".build-checksums.json"
    ignore_file: str = ".gitignore"
    use_lock: bool = True
    build_lock_timeout: int = 30

    def projects(self) -> List[ProjectConfig]:
        """
        Pair directories with deployments positionally.

        Raises:
            ConfigurationError: If the lists differ in length or hold duplicates
        """
        if len(self.directories) != len(self.deployments):
            missing = self.directories[len(self.deployments):]
            if missing:
                raise ConfigurationError(
                    f"No deployment mapped for directory '{missing[0]}' "
                    f"({len(self.directories)} directories, {len(self.deployments)} deployments)",
                    target=missing[0]
                )
            raise ConfigurationError(
                f"{len(self.deployments)} deployments configured for "
                f"{len(self.directories)} directories"
            )

        seen = set()
        for directory in self.directories:
            if directory in seen:
                raise ConfigurationError("Directory listed more than once", target=directory)
            seen.add(directory)

        return [
            ProjectConfig(
                directory=directory,
                deployment=deployment,
                image_name=self.images.get(directory, Path(directory).name),
                container=self.containers.get(directory, deployment)
            )
            for directory, deployment in zip(self.directories, self.deployments)
        ]

    def resolve_path(self, relative: str) -> Path:
        """Resolve a path relative to base_dir"""
        path = Path(relative)
        if path.is_absolute():
            return path
        return Path(self.base_dir) / path


@dataclass
class GlobalConfig:
    """Global configuration for build and deploy runs"""
    registry: RegistryConfig
    kubernetes: KubernetesConfig
    docker: DockerConfig
    build_system: BuildSystemConfig

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GlobalConfig':
        """Create GlobalConfig from dictionary"""
        try:
            return cls(
                registry=RegistryConfig(**(data.get('registry') or {})),
                kubernetes=KubernetesConfig(**(data.get('kubernetes') or {})),
                docker=DockerConfig(**(data.get('docker') or {})),
                build_system=BuildSystemConfig(**(data.get('build_system') or {}))
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'GlobalConfig':
        """Load GlobalConfig from YAML file"""
        path = Path(yaml_path)
        if not path.exists():
            # Return default config if file doesn't exist
            return cls.default()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse {path}: {e}", target=str(path))

        if data is not None and not isinstance(data, dict):
            raise ConfigurationError("Top-level YAML document must be a mapping", target=str(path))

        return cls.from_dict(data or {})

    @classmethod
    def default(cls) -> 'GlobalConfig':
        """Return default configuration"""
        return cls(
            registry=RegistryConfig(),
            kubernetes=KubernetesConfig(),
            docker=DockerConfig(),
            build_system=BuildSystemConfig()
        )

    def with_overrides(
        self,
        registry: Optional[str] = None,
        namespace: Optional[str] = None
    ) -> 'GlobalConfig':
        """Apply command line overrides for registry address and namespace"""
        if registry:
            self.registry.address = registry
        if namespace:
            self.kubernetes.namespace = namespace
        return self


def load_global_config(config_path: Optional[str] = None) -> GlobalConfig:
    """
    Load global configuration from YAML file.
    If no path provided, looks for deploytool.yaml in standard locations.
    """
    if config_path:
        return GlobalConfig.from_yaml(config_path)

    # Try standard locations
    search_paths = [
        Path("./deploytool.yaml"),
        Path("./config/deploytool.yaml"),
        Path("/etc/deploytool/deploytool.yaml"),
    ]

    for path in search_paths:
        if path.exists():
            return GlobalConfig.from_yaml(str(path))

    # Return default if no config found
    return GlobalConfig.default()
