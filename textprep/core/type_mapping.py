"""Mapping from Arrow types to the column kinds used by selectors and steps.

Column kinds:
- nominal: string, large_string, dictionary of strings
- numeric: integer, floating point, decimal
- logical: boolean
- date: date and timestamp
- list: list or large_list (token lists)
- other: everything else
"""

import pyarrow as pa

COLUMN_KINDS = ("nominal", "numeric", "logical", "date", "list", "other")

TOKEN_LIST_TYPE = pa.list_(pa.string())


def is_text_type(arrow_type: pa.DataType) -> bool:
    """Return True for plain or dictionary-encoded string types."""
    if pa.types.is_dictionary(arrow_type):
        return is_text_type(arrow_type.value_type)
    return pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type)


def is_token_list_type(arrow_type: pa.DataType) -> bool:
    """Return True for list types whose values are strings.

    A list of nulls is accepted: Arrow infers ``list<null>`` for a column
    holding only empty lists.
    """
    if not (pa.types.is_list(arrow_type) or pa.types.is_large_list(arrow_type)):
        return False
    value_type = arrow_type.value_type
    return is_text_type(value_type) or pa.types.is_null(value_type)


def arrow_type_to_kind(arrow_type: pa.DataType) -> str:
    """Convert an Arrow type to its column kind.

    Args:
        arrow_type: Arrow DataType

    Returns:
        One of COLUMN_KINDS
    """
    if is_text_type(arrow_type):
        return "nominal"
    if (
        pa.types.is_integer(arrow_type)
        or pa.types.is_floating(arrow_type)
        or pa.types.is_decimal(arrow_type)
    ):
        return "numeric"
    if pa.types.is_boolean(arrow_type):
        return "logical"
    if pa.types.is_date(arrow_type) or pa.types.is_timestamp(arrow_type):
        return "date"
    if pa.types.is_list(arrow_type) or pa.types.is_large_list(arrow_type):
        return "list"
    return "other"
