import os
from dataclasses import dataclass
from datetime import datetime

import csv_loader
import csv_writer


@dataclass(frozen=True)
class FileInfo:
    file_name: str
    file_size: int
    created: datetime
    modified: datetime


class CsvFileHandler:
    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext != ".csv":
            raise ValueError(f"Unsupported file type {self.ext or '(none)'!r} (use .csv)")

    def read_text(self) -> str:
        with open(self.path, "r", encoding=self.encoding, newline="") as f:
            return f.read()

    def load(self, expected_columns=None, expected_rows=None, has_header=False):
        return csv_loader.load(
            self.read_text(), expected_columns, expected_rows, has_header=has_header
        )

    def detect_shape(self, has_header=False) -> tuple[int, int]:
        return csv_loader.detect_shape(self.read_text(), has_header=has_header)

    def save(self, table, path: str | None = None) -> str:
        target = path or self.path
        data = csv_writer.serialize(table).encode(self.encoding)
        with open(target, "wb") as f:
            f.write(data)
        return target

    def info(self) -> FileInfo:
        st = os.stat(self.path)
        birth = getattr(st, "st_birthtime", None)
        return FileInfo(
            file_name=self.path,
            file_size=st.st_size,
            created=datetime.fromtimestamp(birth if birth is not None else st.st_ctime),
            modified=datetime.fromtimestamp(st.st_mtime),
        )
