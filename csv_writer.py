import csv
import io


def _has_carriage_return(table) -> bool:
    fields = list(table.header or [])
    for row in table.rows:
        fields.extend(row)
    return any("\r" in f for f in fields)


def serialize(table) -> str:
    """Render a table as CSV text that ``csv_loader.load`` reads back unchanged.

    Records end with ``\\n``; fields are quoted only when they contain a
    comma, a quote or a newline. A record made of a single empty field
    comes out as ``""`` so it is not mistaken for a blank line. A bare
    ``\\r`` is not quoted by the minimal rule, so any table holding one is
    written with every field quoted.
    """
    quoting = csv.QUOTE_ALL if _has_carriage_return(table) else csv.QUOTE_MINIMAL
    buf = io.StringIO()
    if table.header is not None:
        writer = csv.writer(buf, lineterminator="\n", quoting=quoting)
        writer.writerow(table.header)
    if table.row_count:
        table.df.to_csv(
            buf,
            index=False,
            header=False,
            lineterminator="\n",
            quoting=quoting,
        )
    return buf.getvalue()
