"""Pydantic models for the scaffolded project's configuration."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
DEFAULT_PROJECT_NAME = "my-react-app"


class Language(str, Enum):
    """Source language of the generated React app.

    Every file-extension and label choice is a pure function of this value.

    Example:
        >>> Language.TYPESCRIPT.component_extension
        'tsx'
    """

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @property
    def label(self) -> str:
        return "TypeScript" if self is Language.TYPESCRIPT else "JavaScript"

    @property
    def template(self) -> str:
        return "react-ts" if self is Language.TYPESCRIPT else "react"

    @property
    def component_extension(self) -> str:
        return "tsx" if self is Language.TYPESCRIPT else "jsx"

    @property
    def script_extension(self) -> str:
        return "ts" if self is Language.TYPESCRIPT else "js"

    @property
    def feature_line(self) -> str:
        if self is Language.TYPESCRIPT:
            return "🔧 TypeScript support"
        return "🚀 Modern JavaScript"


def project_name_error(value: str) -> str | None:
    """Return why ``value`` is not a usable project name, or ``None``.

    Only the name itself is checked here; directory collisions depend on the
    working directory and are checked by the prompt.

    Example:
        >>> project_name_error("demo-app") is None
        True
        >>> project_name_error("-demo")
        'Invalid project name format!'
    """
    trimmed = value.strip()
    if not trimmed:
        return "Project name cannot be empty!"
    if not PROJECT_NAME_PATTERN.match(trimmed):
        return "Invalid project name format!"
    return None


class ProjectConfig(BaseModel):
    """Answers collected for one scaffolding run.

    Attributes:
        project_name: Directory and package name for the new app.
        language: Source language; selects the generator template.

    Example:
        >>> ProjectConfig(project_name=" demo-app ").template
        'react'
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    language: Language = Language.JAVASCRIPT

    @field_validator("project_name", mode="before")
    @classmethod
    def normalize_project_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("project_name")
    @classmethod
    def validate_project_name(cls, value: str) -> str:
        problem = project_name_error(value)
        if problem is not None:
            raise ValueError(problem)
        return value

    @property
    def template(self) -> str:
        return self.language.template
