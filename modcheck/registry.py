from typing import Sequence
import subprocess

from modcheck.errors import RegistryLookupError
from modcheck.models import DEFAULT_REGISTRY_COMMAND, DependencyRecord
from modcheck.process import resolve_executable

import logging
logger = logging.getLogger(__name__)


class RegistryClient:
    """Looks up the latest published version of a package with an external command."""

    def __init__(self, command: Sequence[str] = DEFAULT_REGISTRY_COMMAND) -> None:
        """Initialize the client.

        Args:
            command (Sequence[str]): Command to run. Every "{package}" placeholder
                is replaced with the package name.
        """
        self.command = tuple(command)

    def _build_command(self, package_name: str) -> list[str]:
        return resolve_executable([part.replace("{package}", package_name) for part in self.command])

    def latest_version(self, package_name: str) -> str:
        """Return the latest version of a package as a caret constraint.

        Args:
            package_name (str): Name of the package in the registry.

        Raises:
            RegistryLookupError: If the command fails, is not installed,
                or prints no version.

        Returns:
            str: The version prefixed with "^", for example "^1.3.0".
        """
        command = self._build_command(package_name)
        logger.debug(f"Running {' '.join(command)}")

        try:
            result = subprocess.check_output(command, stderr=subprocess.PIPE)
            output = result.decode()
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode(errors="replace").strip()
            raise RegistryLookupError(f"Registry lookup failed for {package_name}: {stderr or e}") from e
        except FileNotFoundError as e:
            raise RegistryLookupError(f"Registry command not found: {command[0]}") from e
        except UnicodeDecodeError as e:
            raise RegistryLookupError(f"Registry returned unreadable output for {package_name}: {e}") from e

        version = "".join(output.split())
        if not version:
            raise RegistryLookupError(f"Registry returned no version for {package_name}")

        return f"^{version}"

    def resolve(self, package_name: str, version: str, dev: bool = False) -> DependencyRecord:
        """Build a DependencyRecord holding both the declared and latest version."""
        return DependencyRecord(
            name=package_name,
            version=version,
            latest_version=self.latest_version(package_name),
            dev=dev
        )
