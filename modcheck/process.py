from typing import Sequence
import shutil


def resolve_executable(command: Sequence[str]) -> list[str]:
    """Return the command with its executable looked up on PATH.

    On Windows this turns "npm" into the full path of npm.cmd. If the
    executable is not found the name is kept, so spawning it fails with
    FileNotFoundError as usual.
    """
    command = list(command)
    if command:
        command[0] = shutil.which(command[0]) or command[0]
    return command
