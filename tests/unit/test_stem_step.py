"""Unit tests for the stem step."""

import pyarrow as pa
import pytest
import Stemmer
from pydantic import ValidationError

from textprep.core.dataset import Dataset
from textprep.core.exceptions import (
    ColumnTypeError,
    ConfigurationError,
    SelectionError,
    StateError,
)
from textprep.core.selectors import summarize_schema
from textprep.steps import StemStep


def train(step, dataset):
    return step.train(dataset, summarize_schema(dataset))


@pytest.fixture
def two_column_dataset():
    """Two token list columns plus a dictionary-encoded label."""
    table = pa.table(
        {
            "title": pa.array([["connected"], ["cats"]], type=pa.list_(pa.string())),
            "text": pa.array(
                [["running", "eggs"], ["connections"]], type=pa.list_(pa.string())
            ),
            "label": pa.array(["spam", "ham"]).dictionary_encode(),
        }
    )
    return Dataset(table)


# ============================================================================
# Construction
# ============================================================================


class TestStemStepConstruction:
    """Tests for creating untrained stem steps."""

    def test_defaults(self):
        """Untrained step uses snowball with no options."""
        step = StemStep(terms=["text"])

        assert step.terms == ("text",)
        assert step.stemmer == "snowball"
        assert step.options == {}
        assert step.trained is False
        assert step.columns is None
        assert step.skip is False
        assert step.role is None

    def test_generated_id(self):
        """Id is generated from the step type."""
        step = StemStep(terms=["text"])

        assert step.id.startswith("stem_")
        assert len(step.id) == len("stem_") + 5

    def test_explicit_id_kept(self):
        """An explicit id is not replaced."""
        step = StemStep(terms=["text"], id="my_stem")
        assert step.id == "my_stem"

    def test_single_selector_string(self):
        """A single selector string is accepted."""
        step = StemStep(terms="text")
        assert step.terms == ("text",)

    def test_empty_terms_raises(self):
        """At least one selector is required."""
        with pytest.raises(ValidationError):
            StemStep(terms=[])

    def test_unsupported_stemmer_accepted(self):
        """Stemmer names are not checked at construction."""
        step = StemStep(terms=["text"], stemmer="porter")
        assert step.stemmer == "porter"

    def test_frozen(self):
        """Steps cannot be modified in place."""
        step = StemStep(terms=["text"])
        with pytest.raises(ValidationError):
            step.trained = True


# ============================================================================
# Train
# ============================================================================


class TestStemStepTrain:
    """Tests for training the stem step."""

    def test_resolves_columns(self, token_dataset):
        """Training resolves selectors and marks the step trained."""
        step = StemStep(terms=["text"], options={"language": "english"}, skip=True)
        trained = train(step, token_dataset)

        assert trained.trained is True
        assert trained.columns == ("text",)
        assert trained.terms == ("text",)
        assert trained.stemmer == step.stemmer
        assert trained.options == {"language": "english"}
        assert trained.skip is True
        assert trained.id == step.id

    def test_returns_new_instance(self, token_dataset):
        """The untrained step is left untouched."""
        step = StemStep(terms=["text"])
        trained = train(step, token_dataset)

        assert trained is not step
        assert step.trained is False
        assert step.columns is None

    def test_selector_functions(self, two_column_dataset):
        """Selectors resolve in selector order without duplicates."""
        step = StemStep(terms=["ends_with('t')", "has_type('list')"])
        trained = train(step, two_column_dataset)

        assert trained.columns == ("text", "title")

    def test_idempotent(self, token_dataset):
        """Training twice with the same data gives the same step."""
        step = StemStep(terms=["text"])
        assert train(step, token_dataset) == train(step, token_dataset)

    def test_missing_column_raises(self, token_dataset):
        """Selecting a missing column fails."""
        step = StemStep(terms=["body"])

        with pytest.raises(SelectionError) as exc_info:
            train(step, token_dataset)

        assert "body" in str(exc_info.value)

    def test_untokenized_column_raises(self, text_dataset):
        """Raw text must be tokenized first."""
        step = StemStep(terms=["text"])

        with pytest.raises(ColumnTypeError) as exc_info:
            train(step, text_dataset)

        assert isinstance(exc_info.value, TypeError)
        assert "list-column expected" in str(exc_info.value)
        assert exc_info.value.context["column"] == "text"

    def test_numeric_column_raises(self, token_dataset):
        """Non-list columns are rejected."""
        with pytest.raises(ColumnTypeError):
            train(StemStep(terms=["id"]), token_dataset)

    def test_null_row_raises(self):
        """Every training row must hold a token list."""
        dataset = Dataset.from_pydict({"text": [["cats"], None]})

        with pytest.raises(ColumnTypeError) as exc_info:
            train(StemStep(terms=["text"]), dataset)

        assert exc_info.value.context["null_rows"] == 1

    def test_null_token_raises(self):
        """Tokens must be strings."""
        dataset = Dataset.from_pydict({"text": [["cats", None]]})

        with pytest.raises(ColumnTypeError):
            train(StemStep(terms=["text"]), dataset)

    def test_all_empty_lists_accepted(self):
        """A column of empty token lists is still a list column."""
        dataset = Dataset.from_pydict({"text": [[], []]})
        trained = train(StemStep(terms=["text"]), dataset)

        assert trained.columns == ("text",)


# ============================================================================
# Apply
# ============================================================================


class TestStemStepApply:
    """Tests for applying the stem step."""

    def test_stems_tokens(self, token_dataset):
        """Stems each token; tokens that are already stems are unchanged."""
        trained = train(StemStep(terms=["text"]), token_dataset)
        result = trained.apply(token_dataset)

        assert result.column("text") == [
            ["I", "would", "not", "eat", "them", "here", "or", "there"],
            ["organ", "organ", "organ"],
        ]

    def test_default_language_is_porter(self):
        """Without options the original Porter algorithm is used, not Porter2."""
        tokens = ["generously", "dying", "knightly", "news", "skies"]
        dataset = Dataset.from_pydict({"text": [tokens]})
        trained = train(StemStep(terms=["text"]), dataset)

        result = trained.apply(dataset).column("text")[0]

        assert result == Stemmer.Stemmer("porter").stemWords(tokens)
        assert result == ["gener", "dy", "knightli", "new", "ski"]
        assert result != Stemmer.Stemmer("english").stemWords(tokens)

    def test_null_token_at_apply_raises(self, token_dataset):
        """A null token in new data fails with the column name."""
        trained = train(StemStep(terms=["text"]), token_dataset)
        new_data = Dataset.from_pydict({"id": [1], "text": [["cats", None]]})

        with pytest.raises(ColumnTypeError) as exc_info:
            trained.apply(new_data)

        assert exc_info.value.context["column"] == "text"
        assert exc_info.value.context["row"] == 0

    def test_preserves_shape(self, token_dataset):
        """Row count, column set and column order are unchanged."""
        trained = train(StemStep(terms=["text"]), token_dataset)
        result = trained.apply(token_dataset)

        assert result.columns == token_dataset.columns
        assert result.row_count == token_dataset.row_count
        assert result.column("id") == [1, 2]
        assert result.field("text").type == pa.list_(pa.string())

    def test_preserves_token_count(self, two_column_dataset):
        """Each row keeps its length and order."""
        trained = train(StemStep(terms=["title", "text"]), two_column_dataset)
        result = trained.apply(two_column_dataset)

        assert result.column("title") == [["connect"], ["cat"]]
        assert result.column("text") == [["run", "egg"], ["connect"]]

    def test_does_not_mutate_input(self, token_dataset):
        """The input dataset is not modified."""
        trained = train(StemStep(terms=["text"]), token_dataset)
        trained.apply(token_dataset)

        assert token_dataset.column("text")[1] == [
            "organizing",
            "organizes",
            "organization",
        ]

    def test_restemming_is_stable(self, token_dataset):
        """Stemming stemmed tokens again changes nothing."""
        trained = train(StemStep(terms=["text"]), token_dataset)
        once = trained.apply(token_dataset)
        twice = trained.apply(once)

        assert twice.column("text") == once.column("text")

    def test_empty_and_missing_rows(self):
        """Empty and null rows become empty lists."""
        training = Dataset.from_pydict({"text": [["cats"], []]})
        trained = train(StemStep(terms=["text"]), training)

        new_data = Dataset.from_pydict(
            {"text": [[], None, ["cats"]]},
        )
        result = trained.apply(new_data)

        assert result.column("text") == [[], [], ["cat"]]

    def test_options_passed_to_stemmer(self, token_dataset):
        """Options reach the stemming backend."""
        trained = train(
            StemStep(terms=["text"], options={"language": "english"}), token_dataset
        )
        assert trained.apply(token_dataset).column("text")[1] == ["organ"] * 3

        bad = train(StemStep(terms=["text"], options={"language": "klingon"}), token_dataset)
        with pytest.raises(KeyError):
            bad.apply(token_dataset)

    def test_untrained_raises(self, token_dataset):
        """Applying an untrained step fails."""
        step = StemStep(terms=["text"])

        with pytest.raises(StateError):
            step.apply(token_dataset)

    def test_unsupported_stemmer_raises_at_apply(self, token_dataset):
        """Unsupported stemmers fail when applied, not when trained."""
        trained = train(StemStep(terms=["text"], stemmer="porter"), token_dataset)

        with pytest.raises(ConfigurationError) as exc_info:
            trained.apply(token_dataset)

        assert "'snowball'" in str(exc_info.value)
        assert exc_info.value.context["stemmer"] == "porter"

    def test_missing_column_in_new_data(self, token_dataset):
        """New data must contain the trained columns."""
        trained = train(StemStep(terms=["text"]), token_dataset)
        new_data = Dataset.from_pydict({"id": [1]})

        with pytest.raises(SelectionError) as exc_info:
            trained.apply(new_data)

        assert exc_info.value.context["missing_columns"] == ["text"]

    def test_dictionary_columns_become_text(self, two_column_dataset):
        """Dictionary-encoded text is converted to plain strings."""
        trained = train(StemStep(terms=["text"]), two_column_dataset)
        result = trained.apply(two_column_dataset)

        assert result.field("label").type == pa.string()
        assert result.column("label") == ["spam", "ham"]
        assert result.column("title") == [["connected"], ["cats"]]


# ============================================================================
# Describe and render
# ============================================================================


class TestStemStepDescribe:
    """Tests for the tabular summary."""

    def test_untrained(self):
        """One row per selector with no value."""
        step = StemStep(terms=["title", "starts_with('te')"], id="stem_1")
        table = step.describe()

        assert table.column_names == ["terms", "value", "id"]
        assert table.to_pydict() == {
            "terms": ["title", "starts_with('te')"],
            "value": [None, None],
            "id": ["stem_1", "stem_1"],
        }

    def test_trained(self, two_column_dataset):
        """One row per resolved column with the stemmer name."""
        step = StemStep(terms=["title", "starts_with('te')"], id="stem_1")
        table = train(step, two_column_dataset).describe()

        assert table.to_pydict() == {
            "terms": ["title", "text"],
            "value": ["snowball", "snowball"],
            "id": ["stem_1", "stem_1"],
        }

    def test_does_not_change_step(self):
        """Describing leaves the step as it was."""
        step = StemStep(terms=["text"])
        before = step.model_dump()
        step.describe()

        assert step.model_dump() == before


class TestStemStepRender:
    """Tests for the one-line summary."""

    def test_untrained(self, capsys):
        """Prints the selectors and returns the step."""
        step = StemStep(terms=["text"])
        assert step.render() is step

        assert capsys.readouterr().out == "Stemming for text\n"

    def test_trained(self, capsys, token_dataset):
        """Trained steps print resolved columns and a marker."""
        trained = train(StemStep(terms=["all_predictors()", "-id"]), token_dataset)
        trained.render()

        assert capsys.readouterr().out == "Stemming for text [trained]\n"

    def test_truncates_long_lists(self):
        """Column lists wider than the width are cut."""
        step = StemStep(terms=[f"column_{i}" for i in range(10)])
        text = step.format(width=30)

        assert text.startswith("Stemming for column_0, column_1")
        assert text.endswith("...")
        assert len(text) <= len("Stemming for ") + 30
