from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, List, Union


def read_text(source: Union[IO[str], Path, str]) -> str:
    """
    Read an entire text stream (e.g. sys.stdin) or UTF-8 file in one go.
    Files are read without newline translation; see split_lines.
    Raises FileNotFoundError if a given path doesn't exist.
    """
    if isinstance(source, (str, Path)):
        with open(source, encoding="utf-8", newline="") as f:
            return f.read()
    return source.read()


def split_lines(text: str) -> List[str]:
    """
    Split on "\\n" only, dropping one trailing "\\r" per line and the empty
    piece after a final newline. Other line-break characters stay in the line.

    Example: "cat\\r\\ndog\\x0c0\\n" -> ["cat", "dog\\x0c0"]
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
