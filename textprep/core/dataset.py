"""Arrow-backed dataset passed between recipe steps."""

from typing import Any

import pyarrow as pa


class Dataset:
    """Immutable tabular dataset backed by a PyArrow Table.

    Steps never modify a dataset in place: every transformation returns a
    new Dataset sharing the untouched columns with its input.
    """

    def __init__(self, table: pa.Table, metadata: dict[str, Any] | None = None):
        """Initialize from Arrow table.

        Args:
            table: PyArrow Table containing the data
            metadata: Optional metadata dictionary

        Raises:
            ValueError: If table has zero columns
        """
        if len(table.column_names) == 0:
            raise ValueError("table cannot have zero columns")

        self._table = table
        self._metadata = metadata or {}

    @classmethod
    def from_rows(
        cls,
        columns: list[str],
        rows: list[list[Any]],
        metadata: dict[str, Any] | None = None,
    ) -> "Dataset":
        """Create Dataset from columns and rows.

        Args:
            columns: List of column names
            rows: List of row data (each row is a list of values)
            metadata: Optional metadata dictionary

        Returns:
            Dataset instance

        Raises:
            ValueError: If columns is empty or row lengths don't match column count
        """
        if len(columns) == 0:
            raise ValueError("columns cannot be empty")

        if rows:
            for i, row in enumerate(rows):
                if len(row) != len(columns):
                    raise ValueError(
                        f"Row {i} length {len(row)} does not match column count {len(columns)}"
                    )
            table = pa.Table.from_pylist([dict(zip(columns, row)) for row in rows])
        else:
            empty_arrays = [pa.array([], type=pa.null()) for _ in columns]
            table = pa.Table.from_arrays(empty_arrays, names=columns)

        return cls(table, metadata)

    @classmethod
    def from_pydict(
        cls,
        mapping: dict[str, list[Any]],
        metadata: dict[str, Any] | None = None,
    ) -> "Dataset":
        """Create Dataset from a column name -> values mapping."""
        return cls(pa.Table.from_pydict(mapping), metadata)

    @property
    def columns(self) -> list[str]:
        """Return column names from Arrow schema."""
        return self._table.column_names

    @property
    def rows(self) -> list[list[Any]]:
        """Return rows as list of lists in column order."""
        column_names = self.columns
        return [[row[col] for col in column_names] for row in self._table.to_pylist()]

    @property
    def row_count(self) -> int:
        """Return number of rows."""
        return len(self._table)

    @property
    def metadata(self) -> dict[str, Any]:
        """Return metadata dictionary."""
        return self._metadata

    @property
    def schema(self) -> pa.Schema:
        """Return the Arrow schema."""
        return self._table.schema

    def to_arrow(self) -> pa.Table:
        """Return underlying Arrow table."""
        return self._table

    def to_pylist(self) -> list[dict[str, Any]]:
        """Return rows as a list of dicts."""
        return self._table.to_pylist()

    def field(self, name: str) -> pa.Field:
        """Return the Arrow field for a column."""
        return self._table.schema.field(name)

    def column(self, name: str) -> list[Any]:
        """Return the per-row Python values of a column."""
        return self._table.column(name).to_pylist()

    def with_column(
        self,
        name: str,
        values: list[Any] | pa.Array,
        type: pa.DataType | None = None,
    ) -> "Dataset":
        """Replace an existing column, keeping its name and position.

        Args:
            name: Column to replace
            values: New per-row values; must match the row count
            type: Optional Arrow type for the new column

        Returns:
            New Dataset with the column replaced

        Raises:
            KeyError: If the column does not exist
            ValueError: If the number of values differs from the row count
        """
        index = self._table.schema.get_field_index(name)
        if index < 0:
            raise KeyError(name)
        if len(values) != self.row_count:
            raise ValueError(
                f"Column '{name}' has {len(values)} values but dataset has {self.row_count} rows"
            )

        array = values if isinstance(values, (pa.Array, pa.ChunkedArray)) else pa.array(values, type=type)
        old_field = self._table.schema.field(index)
        new_field = pa.field(name, array.type, nullable=old_field.nullable)
        table = self._table.set_column(index, new_field, array)
        return Dataset(table, metadata=self._metadata.copy())

    def dictionary_to_text(self) -> "Dataset":
        """Convert dictionary-encoded string columns to plain strings.

        Other columns are passed through unchanged.
        """
        table = self._table
        for index, field in enumerate(table.schema):
            arrow_type = field.type
            if pa.types.is_dictionary(arrow_type) and (
                pa.types.is_string(arrow_type.value_type)
                or pa.types.is_large_string(arrow_type.value_type)
            ):
                decoded = table.column(index).cast(arrow_type.value_type)
                table = table.set_column(
                    index,
                    pa.field(field.name, arrow_type.value_type, nullable=field.nullable),
                    decoded,
                )
        return Dataset(table, metadata=self._metadata.copy())

    def __repr__(self) -> str:
        return f"Dataset(rows={self.row_count}, columns={self.columns})"
