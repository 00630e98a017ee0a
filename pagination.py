from dataclasses import dataclass

from table_errors import IndexOutOfRange

DEFAULT_PAGE_SIZE = 10


def _page_size(page_size: int | None) -> int:
    if not page_size or page_size <= 0:
        return DEFAULT_PAGE_SIZE
    return page_size


@dataclass(frozen=True)
class Page:
    start: int
    end: int

    def __len__(self):
        return self.end - self.start


def page(table, start_row: int, end_row: int) -> list[list[str]]:
    """Copy of the rows in ``[start_row, end_row)``; the table is never touched."""
    total = table.row_count
    if start_row < 0 or start_row > total:
        raise IndexOutOfRange("row", start_row, total)
    if end_row < start_row or end_row > total:
        raise IndexOutOfRange("row", end_row, total)
    if start_row == end_row:
        return []
    return table.df.iloc[start_row:end_row].values.tolist()


def page_by_number(table, page_size: int | None, page_number: int) -> list[list[str]]:
    size = _page_size(page_size)
    total = table.row_count
    start = page_number * size
    if page_number < 0 or (start >= total and not (total == 0 and page_number == 0)):
        raise IndexOutOfRange("page", page_number, max(1, -(-total // size)))
    return page(table, start, min(total, start + size))


def create_pages(row_count: int, page_size: int | None = None) -> list[Page]:
    size = _page_size(page_size)
    pages = []
    start = 0
    while start < row_count:
        end = min(start + size, row_count)
        pages.append(Page(start, end))
        start = end
    return pages


class Paginator:
    def __init__(self, total_rows: int, page_size: int | None = DEFAULT_PAGE_SIZE):
        self.page_size = _page_size(page_size)
        self.page_index = 0
        self.total_rows = max(0, total_rows)
        self._clamp()

    def _clamp(self):
        max_page = self.page_count - 1
        self.page_index = max(0, min(self.page_index, max_page))

    def update_total_rows(self, total_rows: int):
        self.total_rows = max(0, total_rows)
        self._clamp()

    def set_page_size(self, page_size: int | None):
        first_row = self.page_start
        self.page_size = _page_size(page_size)
        self.page_index = first_row // self.page_size
        self._clamp()

    def next_page(self) -> bool:
        if self.page_end < self.total_rows:
            self.page_index += 1
            self._clamp()
            return True
        return False

    def prev_page(self) -> bool:
        if self.page_index > 0:
            self.page_index -= 1
            self._clamp()
            return True
        return False

    def goto_page(self, page_index: int):
        if page_index < 0 or page_index >= self.page_count:
            raise IndexOutOfRange("page", page_index, self.page_count)
        self.page_index = page_index

    def ensure_row_visible(self, row: int):
        if row < 0:
            row = 0
        if self.total_rows == 0:
            self.page_index = 0
            return
        target_index = row // self.page_size
        if target_index != self.page_index:
            self.page_index = target_index
            self._clamp()

    def current_rows(self, table) -> list[list[str]]:
        return page(table, self.page_start, self.page_end)

    @property
    def page_start(self) -> int:
        return min(self.total_rows, self.page_index * self.page_size)

    @property
    def page_end(self) -> int:
        return min(self.total_rows, self.page_index * self.page_size + self.page_size)

    @property
    def page_count(self) -> int:
        if self.total_rows == 0:
            return 1
        return (self.total_rows - 1) // self.page_size + 1
