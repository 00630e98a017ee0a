import os

from pagination import Paginator


class AppState:
    """The one live table of a session, plus where it came from."""

    def __init__(self, table, file_path, file_handler, page_size=None):
        self.file_path = file_path
        self.file_handler = file_handler
        self.table = table
        self.dirty = False
        self.quit_warned = False
        self.paginator = Paginator(table.row_count, page_size)

    def mark_dirty(self, row=None):
        self.dirty = True
        self.quit_warned = False
        self.paginator.update_total_rows(self.table.row_count)
        if row is not None:
            self.paginator.ensure_row_visible(min(row, self.table.row_count - 1))

    def save(self, path=None) -> str:
        target = self.file_handler.save(self.table, path)
        if path is None or os.path.abspath(target) == os.path.abspath(self.file_path):
            self.dirty = False
        return target
