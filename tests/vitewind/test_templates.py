import pytest

from vitewind import templates
from vitewind.models import Language, ProjectConfig
from vitewind.services import IoFailedError


def test_tailwind_config_covers_markup_and_sources() -> None:
    content = templates.tailwind_config()

    assert '"./index.html"' in content
    assert '"./src/**/*.{js,ts,jsx,tsx}"' in content
    assert content.startswith("/** @type {import('tailwindcss').Config} */")


def test_index_css_holds_the_three_directives() -> None:
    assert templates.index_css().splitlines() == [
        "@tailwind base;",
        "@tailwind components;",
        "@tailwind utilities;",
    ]


@pytest.mark.parametrize(
    ("language", "ext"), [(Language.JAVASCRIPT, "jsx"), (Language.TYPESCRIPT, "tsx")]
)
def test_app_component_echoes_its_own_path(language: Language, ext: str) -> None:
    content = templates.app_component(language)

    assert f"src/App.{ext}</code>" in content
    assert "{{" not in content
    assert "const [count, setCount] = useState(0)" in content
    assert "export default App" in content


@pytest.mark.parametrize(
    ("language", "label", "feature", "component", "script"),
    [
        (Language.JAVASCRIPT, "JavaScript", "🚀 Modern JavaScript", "App.jsx", "main.js"),
        (Language.TYPESCRIPT, "TypeScript", "🔧 TypeScript support", "App.tsx", "main.ts"),
    ],
)
def test_readme_is_interpolated_per_language(
    language: Language, label: str, feature: str, component: str, script: str
) -> None:
    content = templates.readme(ProjectConfig(project_name="demo-app", language=language))

    assert content.startswith("# demo-app\n")
    assert f"- {label}\n" in content
    assert f"- {feature}\n" in content
    assert f"│   ├── {component}\n" in content
    assert f"│   └── {script}\n" in content
    assert "demo-app/\n├── public/" in content
    assert "{{" not in content


def test_render_template_leaves_unknown_keys() -> None:
    assert templates.render_template("{{ a }} {{ b }}", {"a": "1"}) == "1 {{ b }}"


def test_read_template_raises_for_missing_file() -> None:
    with pytest.raises(IoFailedError) as exc:
        templates.read_template("missing.tmpl")

    assert isinstance(exc.value, templates.TemplateReadError)
    assert exc.value.template == "missing.tmpl"
    assert exc.value.code == "io_failed"
    assert exc.value.recovery_hint
