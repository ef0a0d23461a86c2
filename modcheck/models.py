from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_REGISTRY_COMMAND = ("npm", "info", "{package}", "version")
DEFAULT_INSTALL_COMMAND = ("npm", "install")
DEFAULT_MODULES_DIR = "node_modules"

@dataclass(frozen=True) # immutable
class DependencyRecord:
    name: str
    version: str # constraint as declared in the manifest
    latest_version: str # e.g. "^1.3.0"
    dev: bool = False # Default: runtime dependency

@dataclass(frozen=True)
class RunConfig:
    """Settings for a single run, built once by the CLI."""
    manifest_path: Path
    registry_command: tuple[str, ...] = field(default=DEFAULT_REGISTRY_COMMAND)
    install_command: tuple[str, ...] = field(default=DEFAULT_INSTALL_COMMAND)
    modules_dir: str = DEFAULT_MODULES_DIR

    @property
    def project_dir(self) -> Path:
        """Directory holding the manifest, where the install runs."""
        return self.manifest_path.parent
