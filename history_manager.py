import os
from typing import List


class HistoryManager:
    """Command history for the interactive prompt, kept in a plain log file."""

    def __init__(self, history_path: str, max_items: int = 100):
        self.history_path = history_path
        self.max_items = max_items
        self.history: List[str] = []

    def load(self) -> List[str]:
        if not os.path.exists(self.history_path):
            self.history = []
            return self.history
        try:
            with open(self.history_path, 'r', encoding='utf-8') as f:
                data = [l.rstrip('\n') for l in f if l.strip()]
        except OSError:
            data = []
        self.history = data[-self.max_items:]
        return self.history

    def append(self, entry: str) -> bool:
        entry = (entry or '').strip()
        if not entry:
            return False
        if self.history and self.history[-1] == entry:
            return False
        self.history.append(entry)
        if len(self.history) > self.max_items:
            self.history = self.history[-self.max_items:]
        return True

    def persist(self, entry: str) -> None:
        entry = (entry or '').strip()
        if not entry:
            return
        try:
            with open(self.history_path, 'a', encoding='utf-8') as f:
                f.write(entry + '\n')
        except OSError:
            pass

    def record(self, entry: str) -> None:
        if self.append(entry):
            self.persist(entry)

    @property
    def items(self) -> List[str]:
        return list(self.history)
