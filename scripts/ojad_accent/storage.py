"""Read and write word records as JSON lines.

One JSON object per line:
    {"kanji": "表示", "morae": ["ひょ", "う", "じ"], "accent_idx": 0, "part_of_speech": "noun"}

If the file name contains ".gz" the file is gzip-compressed.
"""

import gzip
import json
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Union

from .models import WordRecord


PathLike = Union[str, Path]


def _is_compressed(path: PathLike) -> bool:
    return ".gz" in Path(path).name


def _open(path: PathLike, mode: str) -> IO[str]:
    if _is_compressed(path):
        return gzip.open(path, mode + "t", encoding="utf-8")
    return open(path, mode, encoding="utf-8")


def save_words(words: Iterable[WordRecord], path: PathLike) -> int:
    """Write records to a JSON-lines file.

    Args:
        words: Records to write.
        path: Output file; compressed if the name contains ".gz".

    Returns:
        Number of records written.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    count = 0

    with _open(path, "w") as f:
        for word in words:
            f.write(json.dumps(word.to_dict(), ensure_ascii=False))
            f.write("\n")
            count += 1

    return count


def iter_words(path: PathLike) -> Iterator[WordRecord]:
    """Yield records from a JSON-lines file, skipping blank lines.

    Raises:
        ValueError: If a line is not a valid record.
    """
    with _open(path, "r") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                yield WordRecord.from_dict(json.loads(line))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                raise ValueError(f"{path}:{line_no}: invalid record: {e}") from e


def load_words(path: PathLike) -> List[WordRecord]:
    """Load all records from a JSON-lines file."""
    return list(iter_words(path))
