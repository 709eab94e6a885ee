"""Base class shared by every recipe step."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, TextIO

import click
import pyarrow as pa
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from textprep.core.dataset import Dataset
from textprep.core.exceptions import SelectionError, StateError
from textprep.core.ids import rand_id
from textprep.core.printing import format_terms
from textprep.core.selectors import ColumnInfo, resolve_selectors


class Step(BaseModel, ABC):
    """A declarative preprocessing step with a train/apply lifecycle.

    Steps are frozen: ``train`` returns a new, trained copy and ``apply``
    returns a new Dataset. Neither touches the step or its input.

    Fields:
        terms: Column selectors given at construction
        role: Role for new columns; unused by steps that rewrite columns in place
        trained: Whether ``train`` has produced this instance
        columns: Resolved column names, None until trained
        skip: Omit this step when a trained recipe is baked
        id: Unique step id, generated from the step type when not given
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    step_type: ClassVar[str] = "step"
    label: ClassVar[str] = "Operation on "

    terms: tuple[str, ...] = Field(description="Column selector expressions")
    role: str | None = None
    trained: bool = False
    columns: tuple[str, ...] | None = None
    skip: bool = False
    id: str = Field(default="", description="Unique step identifier")

    @model_validator(mode="before")
    @classmethod
    def _default_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("id"):
            data = {**data, "id": rand_id(cls.step_type)}
        return data

    @field_validator("terms", mode="before")
    @classmethod
    def _coerce_terms(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = (value,)
        if not value:
            raise ValueError("at least one column selector is required")
        return value

    @abstractmethod
    def train(self, training: Dataset, info: list[ColumnInfo]) -> "Step":
        """Learn from training data and return a trained copy of this step."""

    @abstractmethod
    def apply(self, new_data: Dataset) -> Dataset:
        """Transform new data with the trained step."""

    def describe(self) -> pa.Table:
        """Tabular summary: one row per selector (untrained) or column (trained)."""
        if self.trained:
            terms = list(self.columns or ())
            value = self._describe_value()
        else:
            terms = list(self.terms)
            value = None
        return pa.table(
            {
                "terms": pa.array(terms, type=pa.string()),
                "value": pa.array([value] * len(terms), type=pa.string()),
                "id": pa.array([self.id] * len(terms), type=pa.string()),
            }
        )

    def format(self, width: int | None = None) -> str:
        """One-line summary of the step."""
        return self.label + format_terms(self.columns, self.terms, self.trained, width)

    def render(self, width: int | None = None, file: TextIO | None = None) -> "Step":
        """Write the one-line summary to ``file`` (stdout by default)."""
        click.echo(self.format(width), file=file)
        return self

    def _describe_value(self) -> str | None:
        return None

    def _resolve_columns(self, info: list[ColumnInfo]) -> tuple[str, ...]:
        return tuple(resolve_selectors(self.terms, info))

    def _require_trained(self) -> None:
        if not self.trained:
            raise StateError(
                f"Step '{self.id}' must be trained before it can be applied",
                context={"step_type": self.step_type, "step_id": self.id},
            )

    def _require_columns(self, dataset: Dataset) -> None:
        present = set(dataset.columns)
        missing = [col for col in self.columns or () if col not in present]
        if missing:
            raise SelectionError(
                f"Columns not found in new data: {missing}",
                context={
                    "step_id": self.id,
                    "missing_columns": missing,
                    "available_columns": dataset.columns,
                },
            )
