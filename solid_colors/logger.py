"""
Simple TSV loggers recording written image files and warnings.
"""
import csv
from pathlib import Path
from typing import Union
import time


class _TsvLogger:
    header = ["row_idx"]

    def __init__(self, out_dir: Union[str, Path], filename: str):
        self.out_dir = Path(out_dir)
        self.out_dir.mkdir(parents=True, exist_ok=True)
        # ensure .tsv extension
        if not filename.endswith(".tsv"):
            filename = Path(filename).stem + ".tsv"
        self.path = self.out_dir / filename
        self._file = open(self.path, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file, delimiter="\t")
        self._writer.writerow(self.header)
        self._idx = 0

    def _write(self, *values):
        self._idx += 1
        timestr = time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())
        self._writer.writerow([self._idx, timestr, *values])
        self._file.flush()

    def close(self):
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class WriteLogger(_TsvLogger):
    """
    TSV logger with one row per written image.

    Columns: row_idx, time_iso, color, path, width, height
    """

    header = ["row_idx", "time_iso", "color", "path", "width", "height"]

    def __init__(self, out_dir: Union[str, Path], filename: str = "write_log.tsv"):
        super().__init__(out_dir, filename)

    def log(self, color: str, path: Union[str, Path], width: int, height: int):
        self._write(color, str(path), width, height)


class MessageLogger(_TsvLogger):
    """Simple TSV logger for textual messages (warnings, debug, info).

    Columns: row_idx, time_iso, level, message
    """

    header = ["row_idx", "time_iso", "level", "message"]

    def __init__(self, out_dir: Union[str, Path], filename: str = "message_log.tsv"):
        super().__init__(out_dir, filename)

    def log(self, level: str, message: str):
        self._write(level.upper(), message)
