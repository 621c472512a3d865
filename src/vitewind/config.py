"""Runtime settings for vitewind.

Settings come from ``VITEWIND_*`` environment variables and are validated
with Pydantic.

Example:
    >>> load_settings({}).vite_version
    'latest'
"""

import os
import shlex
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .services.errors import ValidationFailedError

ENV_PREFIX = "VITEWIND_"
DEFAULT_TAILWIND_PACKAGES = ("tailwindcss@3", "postcss", "autoprefixer")
REQUIRED_EXECUTABLES = ("node", "npm")


class ScaffoldSettings(BaseModel):
    """External tool settings for one run.

    Attributes:
        vite_version: Version tag passed to ``npm create vite@<tag>``.
        tailwind_packages: Dev dependencies installed for Tailwind CSS.
        command_timeout: Per-command timeout in seconds (``None`` waits forever).
        npm: npm executable name or path.
        npx: npx executable name or path.
    """

    model_config = ConfigDict(frozen=True)

    vite_version: str = "latest"
    tailwind_packages: tuple[str, ...] = DEFAULT_TAILWIND_PACKAGES
    command_timeout: float | None = Field(default=None, gt=0)
    npm: str = "npm"
    npx: str = "npx"

    @field_validator("tailwind_packages", mode="before")
    @classmethod
    def split_packages(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(shlex.split(value))
        return value

    @field_validator("tailwind_packages")
    @classmethod
    def require_packages(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one package is required")
        return value

    @field_validator("vite_version", "npm", "npx")
    @classmethod
    def require_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("must not be empty")
        return normalized


def load_settings(environ: Mapping[str, str] | None = None) -> ScaffoldSettings:
    """Build settings from ``VITEWIND_*`` environment variables.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Validated ``ScaffoldSettings``.

    Raises:
        ValidationFailedError: When a variable holds an invalid value.
    """
    source = os.environ if environ is None else environ
    raw: dict[str, str] = {}
    for field_name in ScaffoldSettings.model_fields:
        value = source.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value is not None and value.strip():
            raw[field_name] = value
    try:
        return ScaffoldSettings.model_validate(raw)
    except ValidationError as exc:
        details = "; ".join(
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}"
            for err in exc.errors()
        )
        raise ValidationFailedError(f"invalid settings: {details}") from exc
