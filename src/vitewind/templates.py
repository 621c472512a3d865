"""Bundled project file templates and rendering helpers."""

from __future__ import annotations

from importlib import resources
from typing import Mapping

from .models import Language, ProjectConfig
from .services.errors import IoFailedError

TAILWIND_CONFIG = "tailwind.config.js"
INDEX_CSS = "index.css"
APP_COMPONENT = "App.tmpl"
APP_CSS = "App.css"
README = "README.md.tmpl"


class TemplateReadError(IoFailedError):
    """Raised when a bundled template cannot be read (a broken install)."""

    def __init__(self, *, template: str, detail: str) -> None:
        self.template = template
        super().__init__(
            f"template_read_failed[{template}]: {detail}",
            recovery_hint="Reinstall vitewind; its bundled templates are missing.",
        )


def read_template(name: str) -> str:
    """Read a bundled template file from the package.

    Example:
        >>> read_template("index.css").startswith("@tailwind base;")
        True
    """
    try:
        return (
            resources.files("vitewind")
            .joinpath("templates")
            .joinpath(name)
            .read_text(encoding="utf-8")
        )
    except OSError as exc:
        raise TemplateReadError(template=name, detail=str(exc)) from exc


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Render a template using a simple {{ key }} substitution.

    Example:
        >>> render_template("# {{ name }}", {"name": "demo"})
        '# demo'
    """
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace(f"{{{{ {key} }}}}", value)
    return rendered


def tailwind_config() -> str:
    return read_template(TAILWIND_CONFIG)


def index_css() -> str:
    return read_template(INDEX_CSS)


def app_css() -> str:
    return read_template(APP_CSS)


def app_component(language: Language) -> str:
    return render_template(
        read_template(APP_COMPONENT),
        {"component_extension": language.component_extension},
    )


def readme(config: ProjectConfig) -> str:
    language = config.language
    return render_template(
        read_template(README),
        {
            "project_name": config.project_name,
            "language_label": language.label,
            "language_feature": language.feature_line,
            "component_extension": language.component_extension,
            "script_extension": language.script_extension,
        },
    )
