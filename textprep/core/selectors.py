"""Column schema summaries and selector resolution.

Selectors are plain strings resolved against a list of ColumnInfo:

    text                    exact column name
    starts_with('essay')    name prefix
    ends_with('_txt')       name suffix
    contains('ess')         name substring
    matches('^essay[0-9]')  regular expression search on the name
    has_role('outcome')     columns with a role
    has_type('nominal')     columns of a kind (see type_mapping)
    all_predictors()        has_role('predictor')
    all_outcomes()          has_role('outcome')
    all_nominal()           has_type('nominal')
    all_numeric()           has_type('numeric')
    everything()            all columns
    -<selector>             exclude the columns matched by <selector>
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from textprep.core.dataset import Dataset
from textprep.core.exceptions import SelectionError
from textprep.core.type_mapping import arrow_type_to_kind

DEFAULT_ROLE = "predictor"

_CALL_PATTERN = re.compile(r"^(\w+)\(\s*(?:(['\"])(.*?)\2)?\s*\)$")
_NAME_PATTERN = re.compile(r"^[^()'\"\s][^()'\"]*$")


@dataclass(frozen=True)
class ColumnInfo:
    """Schema entry for one column of a dataset."""

    name: str
    type: str
    role: str = DEFAULT_ROLE


def summarize_schema(
    dataset: Dataset,
    roles: dict[str, str] | None = None,
) -> list[ColumnInfo]:
    """Build column info for every column of a dataset, in column order.

    Args:
        dataset: Dataset to describe
        roles: Optional column name -> role mapping; unlisted columns are predictors

    Returns:
        List of ColumnInfo
    """
    roles = roles or {}
    return [
        ColumnInfo(
            name=field.name,
            type=arrow_type_to_kind(field.type),
            role=roles.get(field.name, DEFAULT_ROLE),
        )
        for field in dataset.schema
    ]


def _by_role(role: str) -> Callable[[ColumnInfo], bool]:
    return lambda col: col.role == role


def _by_type(kind: str) -> Callable[[ColumnInfo], bool]:
    return lambda col: col.type == kind


_ARG_SELECTORS: dict[str, Callable[[str], Callable[[ColumnInfo], bool]]] = {
    "starts_with": lambda arg: lambda col: col.name.startswith(arg),
    "ends_with": lambda arg: lambda col: col.name.endswith(arg),
    "contains": lambda arg: lambda col: arg in col.name,
    "matches": lambda arg: lambda col: re.search(arg, col.name) is not None,
    "has_role": _by_role,
    "has_type": _by_type,
}

_NULLARY_SELECTORS: dict[str, Callable[[ColumnInfo], bool]] = {
    "all_predictors": _by_role("predictor"),
    "all_outcomes": _by_role("outcome"),
    "all_nominal": _by_type("nominal"),
    "all_numeric": _by_type("numeric"),
    "everything": lambda col: True,
}


def _match(selector: str, info: list[ColumnInfo]) -> list[str]:
    """Return the columns one (non-negated) selector matches, in schema order."""
    call = _CALL_PATTERN.match(selector)
    if call:
        func_name, _, arg = call.groups()
        if func_name in _NULLARY_SELECTORS and arg is None:
            predicate = _NULLARY_SELECTORS[func_name]
        elif func_name in _ARG_SELECTORS and arg is not None:
            try:
                predicate = _ARG_SELECTORS[func_name](arg)
                if func_name == "matches":
                    re.compile(arg)
            except re.error as e:
                raise SelectionError(
                    f"Invalid regular expression in selector: {selector}",
                    context={"selector": selector, "error": str(e)},
                ) from e
        else:
            raise SelectionError(
                f"Unknown selector: {selector}",
                context={
                    "selector": selector,
                    "available": sorted([*_ARG_SELECTORS, *_NULLARY_SELECTORS]),
                },
            )
        matched = [col.name for col in info if predicate(col)]
        if not matched:
            raise SelectionError(
                f"Selector '{selector}' did not match any columns",
                context={"selector": selector},
            )
        return matched

    if not _NAME_PATTERN.match(selector):
        raise SelectionError(
            f"Invalid selector: {selector!r}",
            context={"selector": selector},
        )

    names = [col.name for col in info]
    if selector not in names:
        raise SelectionError(
            f"Column not found: '{selector}'",
            context={"selector": selector, "available_columns": names},
        )
    return [selector]


def resolve_selectors(selectors: Iterable[str], info: list[ColumnInfo]) -> list[str]:
    """Resolve selector expressions to an ordered list of column names.

    Args:
        selectors: Selector strings, processed in order
        info: Schema of the dataset the selectors apply to

    Returns:
        Column names in selection order, without duplicates

    Raises:
        SelectionError: If a selector is invalid, names a missing column,
            matches nothing, or the final selection is empty
    """
    selectors = [s.strip() for s in selectors]
    if not selectors:
        raise SelectionError("At least one selector is required")

    selected: list[str] = []
    if selectors[0].startswith("-"):
        selected = [col.name for col in info]

    for selector in selectors:
        if selector.startswith("-"):
            excluded = set(_match(selector[1:].strip(), info))
            selected = [name for name in selected if name not in excluded]
        else:
            for name in _match(selector, info):
                if name not in selected:
                    selected.append(name)

    if not selected:
        raise SelectionError(
            "No columns were selected",
            context={"selectors": selectors},
        )
    return selected
