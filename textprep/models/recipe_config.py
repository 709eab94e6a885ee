"""Recipe configuration combining steps and runtime settings."""

from typing import List

from pydantic import BaseModel, Field

from textprep.models.runtime_config import RuntimeConfig
from textprep.models.step_config import StepConfig
from textprep.steps import Step, create_step


class RecipeConfig(BaseModel):
    """Complete recipe definition for a preprocessing pipeline."""

    name: str = Field(description="Recipe name (required)")
    outcomes: List[str] = Field(
        default_factory=list, description="Columns with the outcome role"
    )
    steps: List[StepConfig] = Field(
        default_factory=list, description="Steps to apply, in order"
    )
    runtime: RuntimeConfig = Field(
        default_factory=RuntimeConfig, description="Runtime configuration"
    )

    @classmethod
    def from_dict(cls, data: dict) -> "RecipeConfig":
        """Create RecipeConfig from dictionary (after template rendering)."""
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str, cli_vars: dict[str, str] | None = None) -> "RecipeConfig":
        """Load recipe configuration from a YAML file."""
        from textprep.models.loader import load_recipe

        return load_recipe(path, cli_vars)

    def build_steps(self) -> list[Step]:
        """Instantiate untrained steps through the step registry.

        Raises:
            ConfigurationError: If a step type is not registered.
        """
        return [create_step(step.type, step.params()) for step in self.steps]
