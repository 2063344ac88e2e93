"""
Subprocess and progress-indicator utilities for project scaffolding.

Long-running steps show a rich spinner while they work and print a
checkmark line when they finish. Failures propagate as exceptions.
"""

import subprocess
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from rich.console import Console
from rich.markup import escape

from ..constants import POLL_INTERVAL
from ..exceptions import CommandError

console = Console(highlight=False)

# Lines of stderr kept in a CommandError message
STDERR_TAIL = 20


@contextmanager
def step(description: str) -> Iterator[None]:
    """
    Show a spinner while the wrapped block runs, then a checkmark.

    Example:
        >>> with step("Creating folders"):
        ...     make_folders()
        ✓ Creating folders
    """
    with console.status(f"{escape(description)}...", spinner="dots"):
        yield
    console.print(f"[green]✓[/green] {escape(description)}")


def run_command(
    cmd: List[str], description: str, cwd: Optional[Path] = None
) -> None:
    """
    Run one command to completion while a spinner animates.

    The process is polled in a sleep loop. Stdout is discarded; stderr goes
    to a temporary file so a chatty installer cannot block on a full pipe.

    Args:
        cmd: Command and arguments
        description: Label shown next to the spinner and checkmark
        cwd: Working directory for the command

    Raises:
        CommandError: If the command cannot be started or exits non-zero
    """
    with tempfile.TemporaryFile(mode="w+") as err:
        try:
            proc = subprocess.Popen(
                cmd,
                cwd=cwd,
                stdout=subprocess.DEVNULL,
                stderr=err,
                text=True,
            )
        except OSError as e:
            raise CommandError(f"Failed to start '{cmd[0]}': {e}") from e

        try:
            with console.status(f"{escape(description)}...", spinner="dots"):
                while proc.poll() is None:
                    time.sleep(POLL_INTERVAL)
        finally:
            if proc.poll() is None:
                proc.wait()

        err.seek(0)
        stderr = err.read()

    if proc.returncode != 0:
        tail = "\n".join(stderr.strip().splitlines()[-STDERR_TAIL:])
        message = f"{description} failed (exit code {proc.returncode})"
        if tail:
            message += f":\n{tail}"
        raise CommandError(message)

    console.print(f"[green]✓[/green] {escape(description)}")
