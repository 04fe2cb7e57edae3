from pathlib import Path
import csv
from typing import Any, Dict, Sequence

class CsvLogger:
    """Row-per-sample CSV sink; every row is flushed so a crash keeps the trace."""
    def __init__(self, path: str, fieldnames: Sequence[str]):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._f = open(self.path, 'w', newline='')
        self._writer = csv.DictWriter(self._f, fieldnames=list(fieldnames))
        self._writer.writeheader()
        self.rows = 0
    def write(self, row: Dict[str, Any]) -> None:
        self._writer.writerow(row); self._f.flush()
        self.rows += 1
    def close(self) -> None:
        if not self._f.closed:
            self._f.close()
    def __enter__(self):
        return self
    def __exit__(self, *exc):
        self.close()
