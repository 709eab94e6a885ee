"""Unit tests for the step registry."""

import pytest

from textprep.core.exceptions import ConfigurationError
from textprep.steps import (
    StemStep,
    TokenizeStep,
    clear_registry,
    create_step,
    get_step_class,
    list_step_types,
    register_step,
)


@pytest.fixture(autouse=True)
def reset_registry():
    """Restore the built-in steps after each test."""
    yield

    clear_registry()
    register_step("stem", StemStep)
    register_step("tokenize", TokenizeStep)


class TestStepRegistry:
    """Tests for step registration and lookup."""

    def test_builtins_registered(self):
        """Built-in steps are registered on import."""
        assert list_step_types() == ["stem", "tokenize"]

    def test_get_step_class(self):
        """Lookup returns the registered class."""
        assert get_step_class("stem") is StemStep

    def test_create_step(self):
        """create_step builds an untrained step from config fields."""
        step = create_step("stem", {"terms": ["text"], "options": {"language": "english"}})

        assert isinstance(step, StemStep)
        assert step.terms == ("text",)
        assert step.options == {"language": "english"}
        assert step.trained is False

    def test_unknown_type_raises(self):
        """Unknown step types list the available types."""
        with pytest.raises(ConfigurationError) as exc_info:
            create_step("lemma", {"terms": ["text"]})

        assert "lemma" in str(exc_info.value)
        assert exc_info.value.context["available_types"] == "stem, tokenize"

    def test_register_duplicate_raises(self):
        """A type name can only be registered once."""
        with pytest.raises(ConfigurationError) as exc_info:
            register_step("stem", StemStep)

        assert "already registered" in str(exc_info.value)

    def test_register_as_decorator(self):
        """register_step works as a class decorator."""

        @register_step("stem_copy")
        class StemCopy(StemStep):
            step_type = "stem_copy"

        assert get_step_class("stem_copy") is StemCopy
        assert create_step("stem_copy", {"terms": ["text"]}).id.startswith("stem_copy_")

    def test_clear_registry(self):
        """clear_registry removes every step type."""
        clear_registry()
        assert list_step_types() == []
