"""Exception hierarchy for the textprep package."""


class TextPrepError(Exception):
    """Base exception for all textprep errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class SelectionError(TextPrepError):
    """Raised when column selectors cannot be resolved against a schema."""

    pass


class ColumnTypeError(TextPrepError, TypeError):
    """Raised when a selected column does not have the shape a step needs."""

    pass


class ConfigurationError(TextPrepError):
    """Raised when a step is configured with an unsupported value."""

    pass


class StateError(TextPrepError):
    """Raised when a step or recipe is used before it has been trained."""

    pass


class RecipeError(TextPrepError):
    """Raised when recipe parsing or validation fails."""

    pass


class StepError(TextPrepError):
    """Raised when a step fails inside the recipe engine."""

    pass
