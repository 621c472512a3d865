"""Service failure contracts.

Workflow steps return typed outcomes on success and raise ServiceFailure on
expected failures (missing tools, bad input, cancellation, failed commands).
Programmer bugs raise normal exceptions.
"""

from __future__ import annotations

from typing import Literal

ServiceFailureCode = Literal[
    "validation_failed",
    "dependency_missing",
    "user_cancelled",
    "external_command_failed",
    "io_failed",
]


class ServiceFailure(Exception):
    """Expected failure: validation, cancellation, or runtime error.

    Use ``raise ServiceFailure(...) from exc`` to chain a causing exception;
    it is available as ``__cause__``. The CLI catches ServiceFailure, logs it
    and exits non-zero.
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    """Validation failed (invalid project name, bad setting)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class DependencyMissingError(ServiceFailure):
    """Required executable is missing from the host."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("dependency_missing", message, recovery_hint=recovery_hint)


class UserCancelledError(ServiceFailure):
    """The user cancelled an interactive prompt."""

    def __init__(self, message: str = "Setup cancelled") -> None:
        super().__init__("user_cancelled", message)


class ExternalCommandFailedError(ServiceFailure):
    """External command (npm, npx) failed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("external_command_failed", message, recovery_hint=recovery_hint)


class IoFailedError(ServiceFailure):
    """Writing a project file failed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("io_failed", message, recovery_hint=recovery_hint)
