"""Interactive collection of the project configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from . import io
from .models import DEFAULT_PROJECT_NAME, Language, ProjectConfig, project_name_error
from .services.errors import ValidationFailedError

BANNER_TITLE = "🚀 React + Vite + Tailwind Setup"
LANGUAGE_CHOICES = tuple((language.label, language.value) for language in Language)


def banner(title: str) -> str:
    rule = "=" * 50
    return f"\n{rule}\n    {title}\n{rule}\n"


def validate_project_name(value: str, cwd: Path) -> str | None:
    """Check a candidate project name against the naming rules and ``cwd``.

    Returns:
        An error message when the name is rejected, otherwise ``None``.
    """
    problem = project_name_error(value)
    if problem is not None:
        return problem
    trimmed = value.strip()
    if (cwd / trimmed).exists():
        return f"Directory '{trimmed}' already exists!"
    return None


def collect_project_config(
    cwd: Path,
    *,
    project_name: str | None = None,
    language: Language | None = None,
) -> ProjectConfig:
    """Ask for whatever the command line did not already provide.

    Args:
        cwd: Directory the project will be created in.
        project_name: Name given on the command line, validated but not prompted.
        language: Language given on the command line.

    Returns:
        The immutable ``ProjectConfig`` for this run.

    Raises:
        ValidationFailedError: When ``project_name`` is given but unusable.
        UserCancelledError: When the user aborts a prompt.
    """
    io.say(banner(BANNER_TITLE))

    if project_name is not None:
        problem = validate_project_name(project_name, cwd)
        if problem is not None:
            raise ValidationFailedError(problem)
    else:
        project_name = io.ask_text(
            "Enter your project name:",
            default=DEFAULT_PROJECT_NAME,
            validate=lambda value: validate_project_name(value, cwd),
        )

    if language is None:
        language = Language(
            io.select("Select language:", LANGUAGE_CHOICES, Language.JAVASCRIPT.value)
        )

    try:
        return ProjectConfig(project_name=project_name, language=language)
    except ValidationError as exc:
        raise ValidationFailedError(str(exc)) from exc
