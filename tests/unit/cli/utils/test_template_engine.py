"""
Template Engine Unit Tests
Real template rendering, real file operations
"""

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from mlscaffold.cli.utils.template_engine import DEFAULT_TEMPLATES_DIR, TemplateEngine


class TestTemplateEngine:
    """Test TemplateEngine with real template files and rendering."""

    @pytest.fixture
    def template_dir(self, tmp_path):
        template_dir = tmp_path / "templates"
        template_dir.mkdir()

        (template_dir / "simple.j2").write_text("Hello {{ name }}!")
        (template_dir / "list.txt.j2").write_text(
            "{% for stage in stages %}\n{{ stage }}/\n{% endfor %}\n"
        )

        nested_dir = template_dir / "nested"
        nested_dir.mkdir()
        (nested_dir / "nested.txt.j2").write_text("Nested: {{ value }}")

        (template_dir / "static.txt").write_text("Static content")
        return template_dir

    def test_initialization_with_valid_directory(self, template_dir):
        engine = TemplateEngine(template_dir)

        assert engine.template_dir == template_dir
        assert engine.env is not None

    def test_initialization_with_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Template directory not found"):
            TemplateEngine(tmp_path / "does_not_exist")

    def test_render_simple_template(self, template_dir):
        engine = TemplateEngine(template_dir)

        assert engine.render_template("simple.j2", {"name": "World"}) == "Hello World!"

    def test_render_loop_keeps_trailing_newline(self, template_dir):
        engine = TemplateEngine(template_dir)

        result = engine.render_template("list.txt.j2", {"stages": ["data", "models"]})

        assert result == "data/\nmodels/\n"

    def test_render_nested_template(self, template_dir):
        engine = TemplateEngine(template_dir)

        assert engine.render_template("nested/nested.txt.j2", {"value": 42}) == "Nested: 42"

    def test_missing_template_raises(self, template_dir):
        engine = TemplateEngine(template_dir)

        with pytest.raises(TemplateNotFound):
            engine.render_template("missing.j2", {})

    def test_missing_variable_raises(self, template_dir):
        engine = TemplateEngine(template_dir)

        with pytest.raises(UndefinedError):
            engine.render_template("simple.j2", {})

    def test_list_templates(self, template_dir):
        engine = TemplateEngine(template_dir)

        assert engine.list_templates() == ["list.txt.j2", "nested/nested.txt.j2", "simple.j2", "static.txt"]
        assert engine.list_templates("*.j2") == ["list.txt.j2", "simple.j2"]
        assert engine.list_templates("nested/*.j2") == ["nested/nested.txt.j2"]


class TestBundledTemplates:
    """패키지에 포함된 seed 템플릿"""

    def test_default_directory_used(self):
        engine = TemplateEngine()

        assert engine.template_dir == DEFAULT_TEMPLATES_DIR
        assert "project/README.md.j2" in engine.list_templates()
        assert "project/gitignore.j2" in engine.list_templates()

    def test_readme_is_project_title(self):
        content = TemplateEngine().render_template("project/README.md.j2", {"project_name": "demo_project"})

        assert content == "# demo_project"

    def test_gitignore_lists_env_and_artifacts(self):
        content = TemplateEngine().render_template("project/gitignore.j2", {"env_dir": "venv"})

        assert content == "venv/\nartifacts/\n"
