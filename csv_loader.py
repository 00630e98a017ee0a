import csv
import io

from table import Table
from table_errors import ParseError, ShapeMismatch

# csv caps fields at 128 KiB by default.
FIELD_SIZE_LIMIT = 2**31 - 1
csv.field_size_limit(max(csv.field_size_limit(), FIELD_SIZE_LIMIT))


def _parse_records(raw_text: str) -> list[list[str]]:
    """Split CSV text into records, honouring double-quote escaping.

    Quoted fields may hold commas, doubled quotes and newlines. Blank lines
    are only tolerated at the very end of the text.
    """
    if raw_text is None or raw_text.strip("\r\n") == "":
        raise ParseError("empty input")
    if "\x00" in raw_text:
        raise ParseError("input contains a NUL byte")

    reader = csv.reader(io.StringIO(raw_text, newline=""), strict=True)
    records = []
    blank_at = None
    try:
        for record in reader:
            if not record:
                if blank_at is None:
                    blank_at = reader.line_num
                continue
            if blank_at is not None:
                raise ParseError(f"blank line at line {blank_at}")
            records.append(record)
    except csv.Error as exc:
        raise ParseError(f"line {reader.line_num}: {exc}") from exc
    return records


def load(raw_text: str, expected_columns: int | None, expected_rows: int | None = None, has_header: bool = False) -> Table:
    records = _parse_records(raw_text)

    if not expected_columns:
        expected_columns = len(records[0])
    if expected_columns < 0:
        raise ValueError("expected_columns must be positive")

    for idx, record in enumerate(records):
        if len(record) != expected_columns:
            raise ShapeMismatch(
                f"record {idx + 1} has {len(record)} fields, expected {expected_columns}",
                expected=expected_columns,
                actual=len(record),
            )

    header = None
    if has_header:
        header, records = records[0], records[1:]

    if expected_rows and len(records) != expected_rows:
        raise ShapeMismatch(
            f"found {len(records)} rows, expected {expected_rows}",
            expected=expected_rows,
            actual=len(records),
        )

    return Table.from_rows(records, header=header, column_count=expected_columns)


def detect_shape(raw_text: str, has_header: bool = False) -> tuple[int, int]:
    """Return ``(columns, rows)`` as found in the text, without enforcing anything."""
    records = _parse_records(raw_text)
    rows = len(records) - 1 if has_header else len(records)
    return len(records[0]), rows


def parse_dimension(text: str) -> tuple[int, int]:
    """Parse the ``ROWS,COLUMNS`` form used on the command line."""
    parts = [p.strip() for p in (text or "").split(",")]
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"dimension must be ROWS,COLUMNS (got {text!r})")
    return int(parts[0]), int(parts[1])


def parse_record(text: str) -> list[str]:
    """Parse one CSV record, e.g. the replacement row typed at the prompt."""
    if text is None or text.strip("\r\n") == "":
        return [""]
    records = _parse_records(text)
    if len(records) != 1:
        raise ParseError(f"expected one record, found {len(records)}")
    return records[0]
