from pathlib import Path
from typing import Any, Iterable
import json
import shutil

from modcheck.errors import BackupError, WriteError
from modcheck.models import DependencyRecord

import logging
logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".backup"


class ManifestWriter:
    """Backs up a package.json and writes it back with updated versions."""

    @staticmethod
    def backup_path(path: Path | str) -> Path:
        """Return the backup location for a manifest, "<path>.backup"."""
        path = Path(path)
        return path.with_name(path.name + BACKUP_SUFFIX)

    def backup(self, path: Path | str) -> Path:
        """Copy the manifest to "<path>.backup", overwriting any previous backup.

        Args:
            path (Path | str): Path to the manifest.

        Raises:
            BackupError: If the copy fails.

        Returns:
            Path: Path of the backup file.
        """
        path = Path(path)
        target = self.backup_path(path)
        logger.info(f"Backup {path.name}")

        try:
            shutil.copyfile(path, target)
        except OSError as e:
            raise BackupError(f"Could not back up {path} to {target}: {e}") from e

        logger.debug(f"Backup written to {target}")
        return target

    @staticmethod
    def merge(manifest: dict[str, Any], records: Iterable[DependencyRecord]) -> dict[str, Any]:
        """Return a copy of the manifest with both dependency groups replaced.

        The groups are rebuilt from the records alone, old entries are not
        kept. Every other key is passed through unchanged.

        Args:
            manifest (dict[str, Any]): The originally parsed manifest.
            records (Iterable[DependencyRecord]): Resolved dependencies.

        Returns:
            dict[str, Any]: The merged manifest.
        """
        dependencies: dict[str, str] = {}
        dev_dependencies: dict[str, str] = {}
        for record in records:
            group = dev_dependencies if record.dev else dependencies
            group[record.name] = record.latest_version

        return {
            **manifest,
            "dependencies": dependencies,
            "devDependencies": dev_dependencies
        }

    def write(self, path: Path | str, manifest: dict[str, Any]) -> None:
        """Overwrite the manifest with pretty-printed JSON (2-space indent).

        Raises:
            WriteError: If the file cannot be written.
        """
        path = Path(path)
        logger.info(f"Create new {path.name}")

        try:
            with path.open("w", encoding="utf-8") as f:
                json.dump(manifest, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise WriteError(f"Could not write {path}: {e}") from e

    def update(
            self,
            path: Path | str,
            manifest: dict[str, Any],
            records: Iterable[DependencyRecord]
    ) -> dict[str, Any]:
        """Back up the manifest, then write it merged with the resolved records.

        The write only happens after a successful backup.

        Returns:
            dict[str, Any]: The manifest as written.
        """
        merged = self.merge(manifest, records)
        self.backup(path)
        self.write(path, merged)
        return merged
