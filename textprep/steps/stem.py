"""Stemming of token list columns."""

import logging
from typing import Any

import pyarrow.compute as pc
from pydantic import Field

from textprep.core.dataset import Dataset
from textprep.core.exceptions import ColumnTypeError
from textprep.core.selectors import ColumnInfo
from textprep.core.type_mapping import TOKEN_LIST_TYPE, is_token_list_type
from textprep.steps.base import Step
from textprep.steps.registry import register_step
from textprep.steps.stemmers import resolve_stemmer, stem_tokens

logger = logging.getLogger(__name__)


@register_step("stem")
class StemStep(Step):
    """Converts token lists into lists of stemmed tokens.

    Words take different forms depending on context, e.g. organize,
    organizes and organizing. Stemming chops word endings with a set of
    heuristics so those forms collapse into one ("organ"), shrinking the
    vocabulary seen by downstream counting and weighting steps.

    The selected columns must already be tokenized. No new columns are
    created, so ``role`` is unused.

    Config:
        terms: Column selectors (see textprep.core.selectors)
        stemmer: Stemming backend; only "snowball" is supported. Checked
                 when the step is applied, not when it is trained.
        options: Keyword arguments passed verbatim to the stemmer,
                 e.g. {"language": "english"}; defaults to "porter"
        skip: Skip the step when a trained recipe is baked
    """

    step_type = "stem"
    label = "Stemming for "

    stemmer: str = Field(default="snowball", description="Stemming backend name")
    options: dict[str, Any] = Field(
        default_factory=dict, description="Options passed to the stemmer"
    )

    def train(self, training: Dataset, info: list[ColumnInfo]) -> "StemStep":
        """Resolve the selected columns and check they hold token lists.

        Raises:
            SelectionError: If a selector matches nothing or names a missing column.
            ColumnTypeError: If a selected column is not a list of strings.
        """
        columns = self._resolve_columns(info)
        _check_token_lists(training, columns)

        logger.debug(
            "Trained stem step",
            extra={"step_id": self.id, "context": {"columns": list(columns)}},
        )
        return self.model_copy(update={"trained": True, "columns": columns})

    def apply(self, new_data: Dataset) -> Dataset:
        """Stem every token of the selected columns.

        Each row keeps its length and order; a missing or empty row becomes
        an empty list. Dictionary-encoded text columns of the result are
        converted to plain strings.

        Raises:
            StateError: If the step has not been trained.
            ConfigurationError: If the stemmer is not supported.
            ColumnTypeError: If a row holds a null token.
        """
        self._require_trained()
        stem_fun = resolve_stemmer(self.stemmer)
        self._require_columns(new_data)

        result = new_data
        for name in self.columns:
            stemmed = []
            for row, tokens in enumerate(result.column(name)):
                if tokens and any(token is None for token in tokens):
                    raise ColumnTypeError(
                        "list-column expected",
                        context={"column": name, "row": row, "reason": "null tokens"},
                    )
                stemmed.append(stem_tokens(stem_fun, tokens, self.options))
            result = result.with_column(name, stemmed, type=TOKEN_LIST_TYPE)

        return result.dictionary_to_text()

    def _describe_value(self) -> str:
        return self.stemmer


def _check_token_lists(training: Dataset, columns: tuple[str, ...]) -> None:
    """Raise ColumnTypeError unless every row of every column is a token list."""
    table = training.to_arrow()
    for name in columns:
        arrow_type = table.schema.field(name).type
        if not is_token_list_type(arrow_type):
            raise ColumnTypeError(
                "list-column expected",
                context={"column": name, "type": str(arrow_type)},
            )

        column = table.column(name)
        if column.null_count:
            raise ColumnTypeError(
                "list-column expected",
                context={"column": name, "null_rows": column.null_count},
            )
        if pc.list_flatten(column).null_count:
            raise ColumnTypeError(
                "list-column expected",
                context={"column": name, "reason": "null tokens"},
            )
