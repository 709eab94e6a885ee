"""Reading and writing datasets from files."""

import json
from pathlib import Path

import pyarrow.csv as pa_csv
import pyarrow.json as pa_json
import pyarrow.parquet as pq

from textprep.core.dataset import Dataset
from textprep.core.exceptions import TextPrepError

_JSON_LINES_SUFFIXES = {".jsonl", ".ndjson"}


def read_dataset(path: str | Path) -> Dataset:
    """Read a CSV, Parquet or JSON lines file into a Dataset.

    Raises:
        TextPrepError: If the file type is not supported.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        table = pa_csv.read_csv(path)
    elif suffix == ".parquet":
        table = pq.read_table(path)
    elif suffix in _JSON_LINES_SUFFIXES:
        table = pa_json.read_json(path)
    else:
        raise TextPrepError(
            f"Unsupported input file type: {suffix or '(none)'}",
            context={"path": str(path), "supported": [".csv", ".parquet", ".jsonl"]},
        )

    return Dataset(table, metadata={"source": str(path)})


def write_dataset(dataset: Dataset, path: str | Path) -> None:
    """Write a Dataset to a Parquet or JSON lines file.

    CSV is not offered because token list columns have no CSV representation.

    Raises:
        TextPrepError: If the file type is not supported.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".parquet":
        pq.write_table(dataset.to_arrow(), path)
    elif suffix in _JSON_LINES_SUFFIXES:
        with open(path, "w", encoding="utf-8") as f:
            for line in iter_json_lines(dataset):
                f.write(line + "\n")
    else:
        raise TextPrepError(
            f"Unsupported output file type: {suffix or '(none)'}",
            context={"path": str(path), "supported": [".parquet", ".jsonl"]},
        )


def iter_json_lines(dataset: Dataset):
    """Yield one JSON document per row."""
    for row in dataset.to_pylist():
        yield json.dumps(row, default=str, ensure_ascii=False)
