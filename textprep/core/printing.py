"""Plain-text summaries for steps and recipes."""

import shutil
from typing import Sequence

MIN_WIDTH = 20


def default_width() -> int:
    """Width available for a column list, based on the terminal size."""
    return max(MIN_WIDTH, shutil.get_terminal_size().columns - 30)


def format_terms(
    columns: Sequence[str] | None,
    terms: Sequence[str],
    trained: bool,
    width: int | None = None,
) -> str:
    """Format the columns (trained) or selectors (untrained) of a step.

    The list is cut to ``width`` characters with a trailing ``...`` when it
    does not fit. Trained steps get a `` [trained]`` marker.
    """
    width = max(MIN_WIDTH, width if width is not None else default_width())
    names = columns if trained and columns is not None else terms
    text = ", ".join(names)
    if len(text) > width:
        text = text[: width - 3].rstrip(", ") + "..."
    if trained:
        text += " [trained]"
    return text
