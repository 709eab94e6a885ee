"""Runtime configuration model for recipe definitions."""

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RuntimeConfig(BaseModel):
    """Configuration for runtime behavior."""

    retain: bool = Field(
        default=True,
        description="Keep the processed training data after prep",
    )
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON format for logs")
    print_width: int | None = Field(
        default=None,
        description="Width for step summaries (defaults to terminal width)",
        gt=0,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log_level is a known level name."""
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
