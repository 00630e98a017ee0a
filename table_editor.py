# ~/Apps/csvdim/table_editor.py
import pandas as pd

from table_errors import IndexOutOfRange, ShapeMismatch


def _check_row(table, row_index: int):
    if not 0 <= row_index < table.row_count:
        raise IndexOutOfRange("row", row_index, table.row_count)


def _check_column(table, column_index: int):
    if not 0 <= column_index < table.column_count:
        raise IndexOutOfRange("column", column_index, table.column_count)


def delete_row(table, row_index: int) -> None:
    """Remove a row; later rows move up by one."""
    _check_row(table, row_index)
    df = table.df
    table.df = df.drop(df.index[row_index]).reset_index(drop=True)


def set_field(table, row_index: int, column_index: int, value) -> None:
    _check_row(table, row_index)
    _check_column(table, column_index)
    table.df.iat[row_index, column_index] = "" if value is None else str(value)


def replace_row(table, row_index: int, fields) -> None:
    _check_row(table, row_index)
    fields = ["" if f is None else str(f) for f in fields]
    if len(fields) != table.column_count:
        raise ShapeMismatch(
            f"replacement row has {len(fields)} fields, expected {table.column_count}",
            expected=table.column_count,
            actual=len(fields),
        )
    table.df.iloc[row_index] = pd.Series(fields, index=table.df.columns, dtype=object)
