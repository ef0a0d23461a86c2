from pathlib import Path
from typing import Sequence
import shutil
import subprocess

from modcheck.errors import InstallError
from modcheck.models import DEFAULT_INSTALL_COMMAND, DEFAULT_MODULES_DIR
from modcheck.process import resolve_executable

import logging
logger = logging.getLogger(__name__)


class DependencyInstaller:
    """Removes the installed packages of a project and installs them again."""

    def __init__(
            self,
            project_dir: Path | str,
            command: Sequence[str] = DEFAULT_INSTALL_COMMAND,
            modules_dir: str = DEFAULT_MODULES_DIR
    ) -> None:
        """Initialize the installer.

        Args:
            project_dir (Path | str): Directory containing the manifest.
            command (Sequence[str]): Install command, run inside project_dir.
            modules_dir (str): Name of the installed-package directory.
        """
        self.project_dir = Path(project_dir)
        self.command = list(command)
        self.modules_dir = self.project_dir / modules_dir

    def clear_modules(self) -> None:
        """Delete the installed-package directory, if there is one.

        A symlink or a plain file at that path is removed itself, the
        symlink target is left alone.

        Raises:
            InstallError: If the path exists but cannot be removed.
        """
        logger.info(f"clear old {self.modules_dir.name}")
        # exists() is False for a dangling symlink
        if not self.modules_dir.exists() and not self.modules_dir.is_symlink():
            logger.debug(f"{self.modules_dir} does not exist, nothing to clear")
            return

        try:
            if self.modules_dir.is_symlink() or not self.modules_dir.is_dir():
                self.modules_dir.unlink()
            else:
                shutil.rmtree(self.modules_dir)
        except OSError as e:
            raise InstallError(f"Could not remove {self.modules_dir}: {e}") from e

    def install(self) -> int:
        """Run the install command and wait for it to finish.

        Output goes straight to the terminal.

        Raises:
            InstallError: If the command is missing or exits with a non-zero status.

        Returns:
            int: The exit status of the install command (always 0).
        """
        logger.info("installing latest version dependencies")
        logger.debug(f"Running {' '.join(self.command)} in {self.project_dir}")

        try:
            completed = subprocess.run(resolve_executable(self.command), cwd=self.project_dir)
        except FileNotFoundError as e:
            raise InstallError(f"Install command not found: {self.command[0]}") from e

        if completed.returncode != 0:
            raise InstallError(f"{' '.join(self.command)} exited with status {completed.returncode}")

        return completed.returncode

    def reinstall(self) -> int:
        self.clear_modules()
        return self.install()
