"""Recipe engine: an ordered sequence of steps with prep and bake phases."""

import logging
from collections import Counter
from typing import Any, Callable, Sequence, TextIO

import click
import pyarrow as pa

from textprep.core.dataset import Dataset
from textprep.core.exceptions import SelectionError, StateError, StepError, TextPrepError
from textprep.core.selectors import ColumnInfo, summarize_schema
from textprep.steps.base import Step

logger = logging.getLogger(__name__)


class Recipe:
    """Immutable, ordered collection of preprocessing steps.

    ``prep`` trains the steps one after another on training data and
    returns a new, trained recipe; ``bake`` applies the trained steps to
    new data. Every method that changes the recipe returns a new Recipe.
    """

    def __init__(
        self,
        template: Dataset,
        roles: dict[str, str] | None = None,
        steps: Sequence[Step] = (),
        trained: bool = False,
        retained: Dataset | None = None,
        name: str | None = None,
    ):
        """Initialize recipe.

        Args:
            template: Dataset whose schema defines the recipe inputs
            roles: Column name -> role mapping; unlisted columns are predictors
            steps: Steps in execution order
            trained: Whether every step has been trained by ``prep``
            retained: Processed training data kept by ``prep``
            name: Optional name used in logs
        """
        self._template = template
        self._roles = dict(roles or {})
        self._steps = tuple(steps)
        self._trained = trained
        self._retained = retained
        self._name = name

    @classmethod
    def from_dataset(
        cls,
        data: Dataset,
        outcomes: Sequence[str] = (),
        name: str | None = None,
    ) -> "Recipe":
        """Create an empty recipe whose outcomes are the given columns.

        Raises:
            SelectionError: If an outcome column is not in the data.
        """
        missing = [col for col in outcomes if col not in data.columns]
        if missing:
            raise SelectionError(
                f"Outcome columns not found: {missing}",
                context={"missing_columns": missing, "available_columns": data.columns},
            )
        return cls(data, roles={col: "outcome" for col in outcomes}, name=name)

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def trained(self) -> bool:
        return self._trained

    def info(self) -> list[ColumnInfo]:
        """Schema of the recipe inputs."""
        return summarize_schema(self._template, self._roles)

    def add_step(self, step: Step) -> "Recipe":
        """Return a new, untrained recipe with ``step`` appended."""
        return Recipe(
            self._template,
            roles=self._roles,
            steps=(*self._steps, step),
            name=self._name,
        )

    def prep(self, training: Dataset | None = None, retain: bool = True) -> "Recipe":
        """Train every step in order and return the trained recipe.

        Each untrained step is trained on the output of the previous steps,
        then applied to it. Skipped steps are still applied during prep.

        Args:
            training: Training data; defaults to the template
            retain: Keep the processed training data for ``juice``

        Returns:
            New trained Recipe
        """
        data = training if training is not None else self._template
        info = summarize_schema(data, self._roles)
        trained_steps: list[Step] = []

        for index, step in enumerate(self._steps):
            logger.info(
                f"Training step {index + 1}/{len(self._steps)}: {step.step_type}",
                extra=self._log_extra(step),
            )
            if not step.trained:
                step = self._call_step(index, step, step.train, data, info)
            data = self._call_step(index, step, step.apply, data)
            info = summarize_schema(data, self._roles)
            trained_steps.append(step)

        return Recipe(
            self._template,
            roles=self._roles,
            steps=trained_steps,
            trained=True,
            retained=data if retain else None,
            name=self._name,
        )

    def bake(self, new_data: Dataset) -> Dataset:
        """Apply the trained steps to new data, leaving out skipped steps.

        Raises:
            StateError: If the recipe has not been prepped.
        """
        if not self._trained:
            raise StateError("Recipe must be prepped before it can be baked")

        data = new_data
        for index, step in enumerate(self._steps):
            if step.skip:
                logger.debug(f"Skipping step {index + 1}", extra=self._log_extra(step))
                continue
            data = self._call_step(index, step, step.apply, data)
        return data

    def juice(self) -> Dataset:
        """Return the processed training data retained by ``prep``.

        Raises:
            StateError: If the recipe is untrained or was prepped with retain=False.
        """
        if not self._trained or self._retained is None:
            raise StateError(
                "No retained training data; use prep(retain=True)",
                context={"trained": self._trained},
            )
        return self._retained

    def tidy(self, index: int | None = None) -> pa.Table:
        """Summarize the recipe, or one step when ``index`` is given.

        Raises:
            IndexError: If ``index`` is negative or out of range.
        """
        if index is not None:
            if not 0 <= index < len(self._steps):
                raise IndexError(f"step index {index} out of range")
            return self._steps[index].describe()

        return pa.table(
            {
                "number": pa.array(range(len(self._steps)), type=pa.int64()),
                "type": pa.array([s.step_type for s in self._steps], type=pa.string()),
                "trained": pa.array([s.trained for s in self._steps], type=pa.bool_()),
                "skip": pa.array([s.skip for s in self._steps], type=pa.bool_()),
                "id": pa.array([s.id for s in self._steps], type=pa.string()),
            }
        )

    def format(self, width: int | None = None) -> str:
        """Multi-line summary of inputs and operations."""
        role_counts = Counter(col.role for col in self.info())
        lines = ["Data Recipe", "", "Inputs:", ""]
        lines.append(f"{'role':>10} #variables")
        for role, count in sorted(role_counts.items()):
            lines.append(f"{role:>10} {count:>10}")
        if self._steps:
            lines.extend(["", "Operations:", ""])
            lines.extend(step.format(width) for step in self._steps)
        return "\n".join(lines)

    def render(self, width: int | None = None, file: TextIO | None = None) -> "Recipe":
        """Write the recipe summary to ``file`` (stdout by default)."""
        click.echo(self.format(width), file=file)
        return self

    def _call_step(self, index: int, step: Step, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return func(*args)
        except TextPrepError:
            raise
        except Exception as e:
            raise StepError(
                f"Step failed at index {index}",
                context={
                    "step_index": index,
                    "step_type": step.step_type,
                    "step_id": step.id,
                    "error": str(e),
                },
            ) from e

    def _log_extra(self, step: Step) -> dict[str, Any]:
        extra: dict[str, Any] = {"step_id": step.id}
        if self._name:
            extra["recipe_name"] = self._name
        return extra

    def __repr__(self) -> str:
        return f"Recipe(steps={len(self._steps)}, trained={self._trained})"
