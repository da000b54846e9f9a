"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import Template, TemplateNotFound

from lettersmith.contexts.templating.exceptions import TemplateRenderError
from lettersmith.contexts.templating.registries import TEMPLATES_PATH, TemplateRegistry

LETTER_TEMPLATES = ["opening", "body", "closing", "letter"]


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path == TEMPLATES_PATH
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("name", LETTER_TEMPLATES)
def test_packaged_templates_load(name):
    """Every template the composer renders ships with the package."""
    registry = TemplateRegistry()
    assert isinstance(registry.get_template(name), Template)
    assert registry.is_cached(name)


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("opening")
    template2 = registry.get_template("opening")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound, match="nonexistent"):
        registry.get_template("nonexistent")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    path = TemplateRegistry().get_template_path("closing")

    assert isinstance(path, Path)
    assert path.name == "closing.txt.jinja"


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("closing")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_render_strips_comment_and_whitespace():
    text = TemplateRegistry().render("opening", job_title="Data Engineer", highlight_phrase="sql, dbt")
    assert text == (
        "I am writing to express my interest in Data Engineer. With proven experience in "
        "sql, dbt and a track record of delivering results, I am confident I would be a "
        "strong fit for your team."
    )


@pytest.mark.unit
def test_render_missing_variable_raises_render_error():
    """StrictUndefined turns a missing context key into a TemplateRenderError."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError) as exc_info:
        registry.render("opening", job_title="Data Engineer")

    error = exc_info.value
    assert error.template_name == "opening"
    assert error.template_path == registry.get_template_path("opening")
    assert error.original_error is not None
    assert "opening.txt.jinja" in str(error)


@pytest.mark.unit
def test_render_missing_template_raises_render_error():
    with pytest.raises(TemplateRenderError) as exc_info:
        TemplateRegistry().render("nonexistent")
    assert isinstance(exc_info.value.original_error, TemplateNotFound)


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    (tmp_path / "greeting.txt.jinja").write_text("Hello {{ name }}!\n")
    registry = TemplateRegistry(tmp_path)
    assert registry.render("greeting", name="Ada") == "Hello Ada!"
