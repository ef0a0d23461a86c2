import argparse
import sys
import textwrap
from pathlib import Path
from typing import Any

from colorama import Fore, Style

from modcheck.errors import ModulesCheckError
from modcheck.installer import DependencyInstaller
from modcheck.models import DependencyRecord, RunConfig
from modcheck.reader import get_dependency_groups, read_manifest
from modcheck.registry import RegistryClient
from modcheck.reporter import VersionReporter
from modcheck.writer import ManifestWriter

import logging
logger = logging.getLogger(__name__)

PROG = "modules-check"


class ModulesCheckArgumentParser(argparse.ArgumentParser):
    """Custom ArgumentParser that incorporates colored error messages."""

    def error(self, message: str) -> None:
        """Prints a usage message incorporating the message to stderr and exits.

        Args:
            message (str): The error message to display.

        Raises:
            SystemExit: Always exits the program with status code 2.
        """
        self.print_usage(sys.stderr)
        self.exit(2, f"{Fore.RED}{self.prog}: error: {message}{Style.RESET_ALL}\n")


def build_parser() -> ModulesCheckArgumentParser:
    parser = ModulesCheckArgumentParser(
        prog=PROG,
        description=textwrap.dedent("""
            This tool checks the latest published version of every dependency
            in a package.json, rewrites the file with the new versions (keeping
            a .backup copy) and reinstalls the dependencies.
        """).strip()
    )
    # Any number is accepted here, main() decides what to do with them
    parser.add_argument("manifest", nargs="*", metavar="package.json", help="Path to the package.json to update")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output (show DEBUG messages)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress most output (show only WARNING or higher messages)")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Create and parse the command-line arguments for modules-check.

    Args:
        argv (list[str] | None): Arguments to parse, defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    return build_parser().parse_args(argv)


def print_help(stream=None) -> None:
    """Print the usage text in green."""
    stream = stream or sys.stdout
    print(f"{Fore.GREEN}{build_parser().format_help()}{Style.RESET_ALL}", file=stream)


def build_config(args: argparse.Namespace) -> RunConfig:
    """Turn the single positional argument into the run configuration."""
    [manifest] = args.manifest
    return RunConfig(manifest_path=Path(manifest))


def resolve_group(
        packages: dict[str, str],
        dev: bool,
        registry: RegistryClient,
        reporter: VersionReporter
) -> list[DependencyRecord]:
    """Query the registry for each package in order, printing each result as it arrives."""
    records = (registry.resolve(name, version, dev=dev) for name, version in packages.items())
    return reporter.report_group(records, dev)


def run(
        config: RunConfig,
        *,
        registry: RegistryClient | None = None,
        reporter: VersionReporter | None = None,
        writer: ManifestWriter | None = None,
        installer: DependencyInstaller | None = None
) -> dict[str, Any]:
    """Run the whole update: read, resolve, report, back up, write and reinstall.

    Args:
        config (RunConfig): Settings for this run.
        registry, reporter, writer, installer: Optional replacements for the
            default collaborators built from config.

    Raises:
        ModulesCheckError: On the first failing step. Nothing after it runs.

    Returns:
        dict[str, Any]: The manifest as written to disk.
    """
    registry = registry or RegistryClient(config.registry_command)
    reporter = reporter or VersionReporter()
    writer = writer or ManifestWriter()
    installer = installer or DependencyInstaller(
        config.project_dir,
        command=config.install_command,
        modules_dir=config.modules_dir
    )

    manifest = read_manifest(config.manifest_path)
    dependencies, dev_dependencies = get_dependency_groups(manifest)

    logger.info("Checking latest version...")
    records = resolve_group(dependencies, False, registry, reporter)
    records += resolve_group(dev_dependencies, True, registry, reporter)

    merged = writer.update(config.manifest_path, manifest, records)

    installer.reinstall()
    return merged


def main(args: argparse.Namespace) -> int:
    if len(args.manifest) != 1:
        print_help()
        return 0

    try:
        config = build_config(args)
        run(config)
        return 0
    except ModulesCheckError as e:
        logger.error(e)
        return 1
