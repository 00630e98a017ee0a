import shlex
from dataclasses import dataclass

import csv_loader
import pagination
import table_editor
from table_view import TableView, render_info, render_pages

HELP_TEXT = """Commands:
  show                    display every row
  page [N]                display page N (1-based, default current page)
  next | prev             move to the next/previous page and display it
  range START END         display rows START..END-1
  pages                   list page boundaries
  size N                  set rows per page
  del ROW                 delete a row
  set ROW COL VALUE       replace one field
  row ROW F1,F2,...       replace a whole row
  info                    file metadata and shape
  save [PATH]             write to PATH (default: source file)
  history                 recent commands
  help                    this text
  quit                    leave"""


class CommandError(ValueError):
    """Bad command syntax or arguments."""


@dataclass
class CommandResult:
    output: str = ""
    quit: bool = False


def _int_arg(value: str, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise CommandError(f"{name} must be an integer (got {value!r})") from None


class CommandExecutor:
    ALIASES = {
        "display": "show",
        "exit": "quit",
        "q": "quit",
        "delete": "del",
        "modify": "set",
        "write": "save",
        "w": "save",
    }

    def __init__(self, app_state, history=None, interactive=False):
        self.state = app_state
        self.history = history
        self.interactive = interactive
        self._handlers = {
            "show": self._cmd_show,
            "page": self._cmd_page,
            "next": self._cmd_next,
            "prev": self._cmd_prev,
            "range": self._cmd_range,
            "pages": self._cmd_pages,
            "size": self._cmd_size,
            "del": self._cmd_delete,
            "set": self._cmd_set,
            "row": self._cmd_row,
            "info": self._cmd_info,
            "save": self._cmd_save,
            "history": self._cmd_history,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
        }

    def execute(self, line: str) -> CommandResult:
        try:
            argv = shlex.split(line)
        except ValueError as exc:
            raise CommandError(f"cannot parse command: {exc}") from None
        if not argv:
            return CommandResult()
        name = argv[0].lower()
        name = self.ALIASES.get(name, name)
        handler = self._handlers.get(name)
        if handler is None:
            raise CommandError(f"unknown command {argv[0]!r} (try 'help')")
        return handler(argv[1:])

    # ---------- helpers ----------
    def _view(self, rows, start):
        return TableView(self.state.table).render(rows, start)

    def _current_page(self):
        p = self.state.paginator
        rows = p.current_rows(self.state.table)
        title = f"page {p.page_index + 1}/{p.page_count}"
        return CommandResult(f"{title}\n{self._view(rows, p.page_start)}")

    def _expect(self, args, low, high, usage):
        if not low <= len(args) <= high:
            raise CommandError(f"usage: {usage}")

    # ---------- read-only ----------
    def _cmd_show(self, args):
        self._expect(args, 0, 0, "show")
        return CommandResult(TableView(self.state.table).render_all())

    def _cmd_page(self, args):
        self._expect(args, 0, 1, "page [N]")
        if args:
            self.state.paginator.goto_page(_int_arg(args[0], "page") - 1)
        return self._current_page()

    def _cmd_next(self, args):
        self._expect(args, 0, 0, "next")
        if not self.state.paginator.next_page():
            return CommandResult("already on the last page")
        return self._current_page()

    def _cmd_prev(self, args):
        self._expect(args, 0, 0, "prev")
        if not self.state.paginator.prev_page():
            return CommandResult("already on the first page")
        return self._current_page()

    def _cmd_range(self, args):
        self._expect(args, 2, 2, "range START END")
        start = _int_arg(args[0], "START")
        end = _int_arg(args[1], "END")
        rows = pagination.page(self.state.table, start, end)
        return CommandResult(self._view(rows, start))

    def _cmd_pages(self, args):
        self._expect(args, 0, 0, "pages")
        p = self.state.paginator
        return CommandResult(render_pages(pagination.create_pages(p.total_rows, p.page_size)))

    def _cmd_size(self, args):
        self._expect(args, 1, 1, "size N")
        size = _int_arg(args[0], "N")
        if size <= 0:
            raise CommandError("page size must be positive")
        self.state.paginator.set_page_size(size)
        return CommandResult(f"{size} rows per page")

    def _cmd_info(self, args):
        self._expect(args, 0, 0, "info")
        info = self.state.file_handler.info()
        return CommandResult(render_info(info, self.state.table, self.state.dirty))

    def _cmd_history(self, args):
        self._expect(args, 0, 0, "history")
        items = self.history.items if self.history is not None else []
        return CommandResult("\n".join(items) if items else "no history")

    def _cmd_help(self, args):
        return CommandResult(HELP_TEXT)

    # ---------- mutating ----------
    def _cmd_delete(self, args):
        self._expect(args, 1, 1, "del ROW")
        row = _int_arg(args[0], "ROW")
        table_editor.delete_row(self.state.table, row)
        self.state.mark_dirty(row)
        return CommandResult(f"Deleted row {row}")

    def _cmd_set(self, args):
        self._expect(args, 3, 3, "set ROW COL VALUE")
        row = _int_arg(args[0], "ROW")
        col = _int_arg(args[1], "COL")
        table_editor.set_field(self.state.table, row, col, args[2])
        self.state.mark_dirty(row)
        return CommandResult(f"Set row {row} column {col}")

    def _cmd_row(self, args):
        self._expect(args, 2, 2, "row ROW F1,F2,...")
        row = _int_arg(args[0], "ROW")
        fields = csv_loader.parse_record(args[1])
        table_editor.replace_row(self.state.table, row, fields)
        self.state.mark_dirty(row)
        return CommandResult(f"Replaced row {row}")

    def _cmd_save(self, args):
        self._expect(args, 0, 1, "save [PATH]")
        target = self.state.save(args[0] if args else None)
        return CommandResult(f"Saved {target}")

    def _cmd_quit(self, args):
        if self.interactive and self.state.dirty and not self.state.quit_warned:
            self.state.quit_warned = True
            return CommandResult("unsaved changes; save first or quit again to discard")
        return CommandResult(quit=True)
