"""Step configuration model for recipe definitions."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StepConfig(BaseModel):
    """
    A single step in the recipe.

    Allows step-specific fields beyond 'type' (terms, options, skip, ...).
    """

    model_config = ConfigDict(extra="allow")

    type: str = Field(description="Step type (e.g., 'tokenize', 'stem')")

    def params(self) -> dict[str, Any]:
        """Step fields excluding 'type'."""
        step_dict = self.model_dump()
        step_dict.pop("type", None)
        return step_dict
