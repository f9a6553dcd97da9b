"""
Async wrapper around external command execution (docker, kubectl).
"""
import asyncio
import logging
import shutil
from dataclasses import dataclass
from typing import List, Optional, Sequence


logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a finished (or killed) external command"""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    def error_summary(self, max_chars: int = 500) -> str:
        """Short description of why the command failed"""
        if self.timed_out:
            return f"'{self.args[0]}' timed out"
        detail = (self.stderr or self.stdout).strip()
        if len(detail) > max_chars:
            detail = "..." + detail[-max_chars:]
        return f"'{self.args[0]}' exited with status {self.returncode}: {detail or '<no output>'}"


def which(executable: str) -> Optional[str]:
    """Resolve an executable on PATH"""
    return shutil.which(executable)


async def run_command(
    args: Sequence[str],
    timeout: Optional[float] = None
) -> CommandResult:
    """
    Run a command without a shell and capture its output.

    Args:
        args: Command and arguments
        timeout: Seconds to wait before killing the process (None waits forever)

    Returns:
        CommandResult; a killed process is reported with timed_out=True

    Raises:
        FileNotFoundError: If the executable is not on PATH
    """
    if not args:
        raise ValueError("run_command requires at least one argument")

    head, *rest = args
    resolved = which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")

    command = [resolved, *rest]
    logger.debug(f"Running: {' '.join(command)}")

    process = await asyncio.create_subprocess_exec(
        *command,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE
    )

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Command timed out after {timeout}s: {head}")
        process.kill()
        stdout, stderr = await process.communicate()
        return CommandResult(
            args=list(args),
            returncode=process.returncode if process.returncode is not None else -9,
            stdout=stdout.decode(errors="ignore"),
            stderr=stderr.decode(errors="ignore"),
            timed_out=True
        )

    return CommandResult(
        args=list(args),
        returncode=process.returncode,
        stdout=stdout.decode(errors="ignore"),
        stderr=stderr.decode(errors="ignore")
    )
