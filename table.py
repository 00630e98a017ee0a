import pandas as pd

from table_errors import ShapeMismatch


class Table:
    """Fixed-dimension grid of string fields.

    Rows live in a pandas DataFrame with positional ``object`` columns; every
    field is a ``str``. The shape is fixed at construction: ``column_count``
    never changes, ``row_count`` only shrinks through row deletion.
    """

    def __init__(self, df: pd.DataFrame, header: list[str] | None = None):
        if df.shape[1] == 0:
            raise ShapeMismatch("table needs at least one column", expected=None, actual=0)
        if header is not None and len(header) != df.shape[1]:
            raise ShapeMismatch(
                f"header has {len(header)} fields, expected {df.shape[1]}",
                expected=df.shape[1],
                actual=len(header),
            )
        self._df = df
        self.header = list(header) if header is not None else None

    @classmethod
    def from_rows(cls, rows, header=None, column_count: int | None = None) -> "Table":
        rows = [[str(f) for f in row] for row in rows]
        if column_count is None:
            if header is not None:
                column_count = len(header)
            elif rows:
                column_count = len(rows[0])
            else:
                column_count = 0
        if column_count <= 0:
            raise ShapeMismatch("table needs at least one column", expected=None, actual=0)
        for idx, row in enumerate(rows):
            if len(row) != column_count:
                raise ShapeMismatch(
                    f"row {idx} has {len(row)} fields, expected {column_count}",
                    expected=column_count,
                    actual=len(row),
                )
        df = pd.DataFrame(rows, columns=range(column_count), dtype=object)
        return cls(df, header=[str(h) for h in header] if header is not None else None)

    # ---------- shape ----------
    @property
    def column_count(self) -> int:
        return self._df.shape[1]

    @property
    def row_count(self) -> int:
        return self._df.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        return self.column_count, self.row_count

    def __len__(self):
        return self.row_count

    # ---------- access ----------
    @property
    def df(self) -> pd.DataFrame:
        return self._df

    @df.setter
    def df(self, value: pd.DataFrame):
        if value.shape[1] != self.column_count:
            raise ShapeMismatch(
                f"frame has {value.shape[1]} columns, expected {self.column_count}",
                expected=self.column_count,
                actual=value.shape[1],
            )
        self._df = value

    @property
    def rows(self) -> list[list[str]]:
        return self._df.values.tolist()

    def row(self, row_index: int) -> list[str]:
        return self._df.iloc[row_index].tolist()

    def cell(self, row_index: int, column_index: int) -> str:
        return self._df.iat[row_index, column_index]

    def copy(self) -> "Table":
        return Table(self._df.copy(deep=True), header=self.header)

    def __eq__(self, other):
        if not isinstance(other, Table):
            return NotImplemented
        return self.header == other.header and self.rows == other.rows

    def __repr__(self):
        return f"Table(columns={self.column_count}, rows={self.row_count})"
