# ~/Apps/csvdim/table_view.py
class TableView:
    """Plain-text rendering of table rows for the terminal."""

    MAX_COL_WIDTH = 40

    def __init__(self, table):
        self.table = table

    def _labels(self):
        if self.table.header is not None:
            return [str(h) for h in self.table.header]
        return [str(i) for i in range(self.table.column_count)]

    @staticmethod
    def _flatten(text: str) -> str:
        return text.replace("\r", "\\r").replace("\n", "\\n")

    def _fit(self, text: str, width: int) -> str:
        text = self._flatten(text)
        if len(text) > width:
            return text[: max(0, width - 1)] + "…"
        return text.ljust(width)

    def get_col_width(self, col_idx, rows):
        labels = self._labels()
        max_len = len(labels[col_idx])
        for row in rows:
            max_len = max(max_len, len(self._flatten(row[col_idx])))
        return min(self.MAX_COL_WIDTH, max_len)

    def render(self, rows, start_row: int = 0) -> str:
        """Render ``rows`` with a row-number gutter starting at ``start_row``."""
        labels = self._labels()
        last_row = start_row + max(0, len(rows) - 1)
        row_w = max(3, len(str(last_row)))
        widths = [self.get_col_width(c, rows) for c in range(len(labels))]

        lines = [
            " " * row_w
            + " | "
            + " | ".join(self._fit(label, w) for label, w in zip(labels, widths))
        ]
        lines.append("-" * row_w + "-+-" + "-+-".join("-" * w for w in widths))
        for offset, row in enumerate(rows):
            idx = str(start_row + offset).rjust(row_w)
            cells = " | ".join(self._fit(v, w) for v, w in zip(row, widths))
            lines.append(f"{idx} | {cells}")
        if not rows:
            lines.append("(no rows)")
        return "\n".join(line.rstrip() for line in lines)

    def render_all(self) -> str:
        return self.render(self.table.rows, 0)


def render_pages(pages) -> str:
    if not pages:
        return "0 pages"
    lines = [f"{len(pages)} page{'s' if len(pages) != 1 else ''}"]
    for number, pg in enumerate(pages, start=1):
        lines.append(f"  page {number}: rows {pg.start}-{pg.end - 1}")
    return "\n".join(lines)


def render_info(info, table, dirty: bool) -> str:
    columns, rows = table.shape
    lines = [
        f"file:      {info.file_name}",
        f"size:      {info.file_size} bytes",
        f"created:   {info.created:%Y-%m-%d %H:%M:%S}",
        f"modified:  {info.modified:%Y-%m-%d %H:%M:%S}",
        f"shape:     {rows} rows x {columns} columns",
        f"header:    {'yes' if table.header is not None else 'no'}",
        f"unsaved:   {'yes' if dirty else 'no'}",
    ]
    return "\n".join(lines)
