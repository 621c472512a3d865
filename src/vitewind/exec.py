"""Subprocess helpers for running external tools."""

import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol

from .log import Logger
from .services.errors import ExternalCommandFailedError


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    capture_output: bool = True
    text: bool = True
    timeout_seconds: float | None = None
    stdin: int | None = subprocess.DEVNULL

    @property
    def command_text(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0 and not self.timed_out


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        run_kwargs: dict[str, object] = {
            "cwd": request.cwd,
            "env": request.env,
            "check": False,
        }
        if request.capture_output:
            run_kwargs["capture_output"] = True
            run_kwargs["text"] = request.text
        if request.timeout_seconds is not None:
            run_kwargs["timeout"] = request.timeout_seconds
        if request.stdin is not None:
            run_kwargs["stdin"] = request.stdin
        argv = list(request.argv)
        if argv:
            # npm and npx are .cmd shims on Windows; resolve them up front.
            argv[0] = shutil.which(argv[0]) or argv[0]
        try:
            completed = subprocess.run(argv, **run_kwargs)
        except FileNotFoundError:
            return None
        except subprocess.TimeoutExpired as exc:
            stdout = (exc.stdout or "") if isinstance(exc.stdout, str) else ""
            stderr = (exc.stderr or "") if isinstance(exc.stderr, str) else ""
            return CommandResult(
                argv=request.argv,
                returncode=124,
                stdout=stdout,
                stderr=stderr,
                timed_out=True,
            )

        stdout = completed.stdout if isinstance(completed.stdout, str) else ""
        stderr = completed.stderr if isinstance(completed.stderr, str) else ""
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    return active_runner.run(request)


def command_request(
    command: str,
    cwd: Path | None = None,
    *,
    timeout_seconds: float | None = None,
) -> CommandRequest:
    """Build a captured, non-interactive request from a shell-style string.

    Example:
        >>> command_request("npm install -D postcss").argv
        ('npm', 'install', '-D', 'postcss')
    """
    return CommandRequest(
        argv=tuple(shlex.split(command)),
        cwd=cwd,
        timeout_seconds=timeout_seconds,
    )


def run_step(
    request: CommandRequest,
    *,
    failure_message: str,
    logger: Logger,
    runner: CommandRunner | None = None,
) -> CommandResult:
    """Run one workflow command and raise when it does not succeed.

    Args:
        request: Command to execute.
        failure_message: Summary attached to the raised failure.
        logger: Destination for the command trace and failure details.
        runner: Optional runner override (tests inject fakes here).

    Returns:
        The successful ``CommandResult``.

    Raises:
        ExternalCommandFailedError: When the executable is missing, times out
            or exits non-zero.
    """
    logger.debug(f"$ {request.command_text}")
    result = run_with_runner(request, runner=runner)
    if result is None:
        logger.error(f"Command failed: {request.command_text}")
        logger.error(f"Error: missing required command: {request.argv[0]}")
        raise ExternalCommandFailedError(failure_message)
    if not result.succeeded:
        logger.error(f"Command failed: {request.command_text}")
        if result.timed_out:
            logger.error(f"Error: timed out after {request.timeout_seconds}s")
        detail = result.stderr.strip()
        if detail:
            logger.error(f"Error: {detail}")
        raise ExternalCommandFailedError(failure_message)
    return result
