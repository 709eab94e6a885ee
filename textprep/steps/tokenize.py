"""Tokenization of character columns into token lists."""

import logging
import re
from typing import Any

from pydantic import Field

from textprep.core.dataset import Dataset
from textprep.core.exceptions import ColumnTypeError, ConfigurationError
from textprep.core.selectors import ColumnInfo
from textprep.core.type_mapping import TOKEN_LIST_TYPE, is_text_type
from textprep.steps.base import Step
from textprep.steps.registry import register_step

logger = logging.getLogger(__name__)

# Words keep inner apostrophes: "don't" stays one token
_WORD_PATTERN = re.compile(r"\w+(?:'\w+)*")
_PUNCT_PATTERN = re.compile(r"[^\w\s']")


def _tokenize_words(text: str, lowercase: bool = True, strip_punct: bool = True) -> list[str]:
    if lowercase:
        text = text.lower()
    if strip_punct:
        return _WORD_PATTERN.findall(text)
    return text.split()


def _tokenize_characters(text: str, lowercase: bool = True, strip_punct: bool = True) -> list[str]:
    if lowercase:
        text = text.lower()
    if strip_punct:
        text = _PUNCT_PATTERN.sub("", text)
    return [ch for ch in text if not ch.isspace()]


TOKENIZERS = {
    "words": _tokenize_words,
    "characters": _tokenize_characters,
}


@register_step("tokenize")
class TokenizeStep(Step):
    """Splits character columns into token lists.

    Config:
        terms: Column selectors (see textprep.core.selectors)
        token: "words" or "characters"
        options: lowercase (default True), strip_punct (default True)
    """

    step_type = "tokenize"
    label = "Tokenization for "

    token: str = Field(default="words", description="Unit to split text into")
    options: dict[str, Any] = Field(
        default_factory=dict, description="Options passed to the tokenizer"
    )

    def train(self, training: Dataset, info: list[ColumnInfo]) -> "TokenizeStep":
        """Resolve the selected columns and check they hold text.

        Raises:
            SelectionError: If a selector matches nothing or names a missing column.
            ColumnTypeError: If a selected column is not a text column.
        """
        columns = self._resolve_columns(info)
        for name in columns:
            arrow_type = training.field(name).type
            if not is_text_type(arrow_type):
                raise ColumnTypeError(
                    "character column expected",
                    context={"column": name, "type": str(arrow_type)},
                )
        return self.model_copy(update={"trained": True, "columns": columns})

    def apply(self, new_data: Dataset) -> Dataset:
        """Replace each selected text column with its token lists.

        Raises:
            StateError: If the step has not been trained.
            ConfigurationError: If the token type is not supported.
        """
        self._require_trained()
        tokenizer = TOKENIZERS.get(self.token)
        if tokenizer is None:
            raise ConfigurationError(
                f"Unsupported token type: '{self.token}'",
                context={"token": self.token, "supported": sorted(TOKENIZERS)},
            )
        self._require_columns(new_data)

        result = new_data
        for name in self.columns:
            tokens = [
                tokenizer(text, **self.options) if text is not None else []
                for text in result.column(name)
            ]
            result = result.with_column(name, tokens, type=TOKEN_LIST_TYPE)
            logger.debug(
                f"Tokenized column '{name}'",
                extra={"step_id": self.id},
            )
        return result

    def _describe_value(self) -> str:
        return self.token
