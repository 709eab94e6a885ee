"""Step registry mapping step type names to step classes."""

from typing import Any, Callable, TypeVar, overload

from textprep.core.exceptions import ConfigurationError
from textprep.steps.base import Step

StepClass = type[Step]
S = TypeVar("S", bound=StepClass)

_step_registry: dict[str, StepClass] = {}


@overload
def register_step(step_type: str) -> Callable[[S], S]: ...


@overload
def register_step(step_type: str, step_class: StepClass) -> None: ...


def register_step(
    step_type: str,
    step_class: StepClass | None = None,
) -> Callable[[S], S] | None:
    """Register a step class under a type name.

    Can be used as a decorator or called directly:

        # As decorator
        @register_step("stem")
        class StemStep(Step):
            ...

        # Direct call
        register_step("stem", StemStep)

    Args:
        step_type: Unique identifier for the step kind (e.g., 'stem').
        step_class: Step class (optional if used as decorator).

    Raises:
        ConfigurationError: If a step with the same type is already registered.
    """

    def _register(cls: S) -> S:
        if step_type in _step_registry:
            raise ConfigurationError(
                f"Step '{step_type}' is already registered",
                context={"step_type": step_type},
            )
        _step_registry[step_type] = cls
        return cls

    if step_class is not None:
        _register(step_class)
        return None

    return _register


def get_step_class(step_type: str) -> StepClass:
    """Return the step class registered under a type name.

    Raises:
        ConfigurationError: If the step type is not registered.
    """
    step_class = _step_registry.get(step_type)
    if step_class is None:
        available = ", ".join(sorted(_step_registry.keys())) or "(none)"
        raise ConfigurationError(
            f"Unknown step type: '{step_type}'",
            context={"step_type": step_type, "available_types": available},
        )
    return step_class


def create_step(step_type: str, params: dict[str, Any]) -> Step:
    """Create an untrained step from recipe configuration.

    Args:
        step_type: The step type to instantiate.
        params: Step fields from the recipe (terms, options, skip, id, ...).

    Returns:
        An untrained Step instance.

    Raises:
        ConfigurationError: If the step type is not registered.
    """
    return get_step_class(step_type)(**params)


def list_step_types() -> list[str]:
    """Return a sorted list of all registered step types."""
    return sorted(_step_registry.keys())


def clear_registry() -> None:
    """Clear all registered steps.

    Intended for testing only.
    """
    _step_registry.clear()
