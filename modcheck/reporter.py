from typing import Iterable, TextIO
import sys

from colorama import Fore, Style

from modcheck.models import DependencyRecord


class VersionReporter:
    """Prints current and latest versions of dependencies, one line each."""

    def __init__(self, stream: TextIO | None = None) -> None:
        # None means whatever sys.stdout is at print time
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def print_header(self, dev: bool) -> None:
        self._print("devDependencies: " if dev else "dependencies: ")

    def print_record(self, record: DependencyRecord) -> None:
        """Print "name@version -> name@latest", old part in green, new part in red."""
        name = f"{Fore.YELLOW}{record.name}{Style.RESET_ALL}"
        old = f"{Fore.GREEN}@{record.version}{Style.RESET_ALL}"
        new = f"{Fore.RED}@{record.latest_version}{Style.RESET_ALL}"
        self._print(f"{name}{old} -> {name}{new}")

    def print_footer(self) -> None:
        self._print()

    def report_group(self, records: Iterable[DependencyRecord], dev: bool) -> list[DependencyRecord]:
        """Print a whole dependency group: header, one line per record and a blank line.

        The header is printed before records is consumed, so a lazy iterable
        gets each line printed as soon as its record is produced.

        Returns:
            list[DependencyRecord]: The records, in the order they were printed.
        """
        self.print_header(dev)
        reported = []
        for record in records:
            self.print_record(record)
            reported.append(record)
        self.print_footer()
        return reported
