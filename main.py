import argparse
import readline
import sys

import config_paths
import status_bar
from _version import __version__
from app_state import AppState
from command_executor import CommandError, CommandExecutor
from csv_loader import parse_dimension
from file_handler import CsvFileHandler
from history_manager import HistoryManager
from pagination import create_pages
from table_errors import TableError
from table_view import render_pages

PROG = "csvdim"


def _error(msg: str) -> None:
    print(f"{PROG}: error: {msg}", file=sys.stderr)


def _debug(level: int, wanted: int, msg: str) -> None:
    if level >= wanted:
        print(f"[debug] {msg}", file=sys.stderr)


def build_parser(cfg) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="View, paginate and edit fixed-dimension CSV files.",
    )
    parser.add_argument("file", help="input CSV file")
    parser.add_argument(
        "--dimension",
        metavar="ROWS,COLUMNS",
        help="declared shape; detected from the file when omitted",
    )
    parser.add_argument(
        "--header",
        action=argparse.BooleanOptionalAction,
        default=cfg["HAS_HEADER"],
        help="treat the first record as a header (not counted in ROWS)",
    )
    parser.add_argument(
        "-r",
        "--records-per-page",
        type=int,
        default=cfg["RECORDS_PER_PAGE"],
        help="rows per page (default: %(default)s)",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        metavar="CMD",
        help="run CMD and exit instead of prompting (repeatable)",
    )
    parser.add_argument("-o", "--output", help="save to this path after running commands")
    parser.add_argument(
        "-d", "--debug", action="count", default=0, help="print diagnostics to stderr"
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)
    return parser


def load_state(args, cfg) -> AppState:
    handler = CsvFileHandler(args.file, encoding=cfg["ENCODING"])
    if args.dimension:
        rows, columns = parse_dimension(args.dimension)
    else:
        columns, rows = handler.detect_shape(has_header=args.header)
        _debug(args.debug, 1, f"detected shape {rows} rows x {columns} columns")
    table = handler.load(columns, rows, has_header=args.header)
    state = AppState(table, args.file, handler, page_size=args.records_per_page)
    _debug(args.debug, 1, f"loaded {args.file}: {table.row_count}x{table.column_count}")
    _debug(
        args.debug,
        2,
        render_pages(create_pages(table.row_count, state.paginator.page_size)),
    )
    return state


def run_batch(executor: CommandExecutor, commands) -> None:
    for line in commands:
        result = executor.execute(line)
        if result.output:
            print(result.output)
        if result.quit:
            break


def seed_readline(history: HistoryManager) -> None:
    readline.clear_history()
    for item in history.items:
        readline.add_history(item)


def run_interactive(executor: CommandExecutor, history: HistoryManager) -> None:
    state = executor.state
    seed_readline(history)
    print(status_bar.render_status(status_bar.state_context(state)))
    while True:
        try:
            line = input(f"{PROG}> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue
        if not line.strip():
            continue
        history.record(line)
        try:
            result = executor.execute(line)
        except (TableError, CommandError, OSError, UnicodeError) as exc:
            _error(str(exc))
            continue
        if result.output:
            print(result.output)
        if result.quit:
            break
        print(status_bar.render_status(status_bar.state_context(state)))


def main(argv=None) -> int:
    cfg = config_paths.load_config()
    args = build_parser(cfg).parse_args(argv)
    _debug(args.debug, 2, f"config {cfg}")

    try:
        state = load_state(args, cfg)
    except (TableError, OSError, ValueError, LookupError) as exc:
        _error(str(exc))
        return 1

    if args.command or args.output:
        executor = CommandExecutor(state)
        try:
            run_batch(executor, args.command)
            if args.output:
                print(f"Saved {state.save(args.output)}")
        except (TableError, CommandError, OSError, UnicodeError) as exc:
            _error(str(exc))
            return 1
        return 0

    config_paths.ensure_config_dirs()
    history = HistoryManager(config_paths.HISTORY_PATH, max_items=cfg["HISTORY_SIZE"])
    history.load()
    run_interactive(CommandExecutor(state, history, interactive=True), history)
    return 0


if __name__ == "__main__":
    sys.exit(main())
