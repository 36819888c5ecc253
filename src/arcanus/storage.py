import os
from pathlib import Path
from typing import Sequence

from loguru import logger

from arcanus.entities import StorageError


NEWLINE = os.linesep


def save_list(passwords: Sequence[str], path: Path | str) -> Path:
    """Overwrite `path` with one password per line, no trailing newline."""
    path = Path(path)
    data = NEWLINE.join(passwords).encode("utf-8")
    try:
        # Bytes keep the platform newline from being translated twice
        path.write_bytes(data)
    except OSError as exc:
        logger.error(f"Failed to write passwords to {path}: {exc}")
        raise StorageError("Error: couldn't write passwords to file.") from exc

    logger.info(f"Saved {len(passwords)} passwords to {path}")
    return path


def read_list(path: Path | str) -> list[str]:
    """Read back a password list; lines that are not valid UTF-8 are skipped."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        logger.error(f"Failed to read passwords from {path}: {exc}")
        raise StorageError("Error: cannot read file.") from exc

    passwords: list[str] = []
    for line_number, raw_line in enumerate(raw.splitlines(), start=1):
        try:
            passwords.append(raw_line.decode("utf-8"))
        except UnicodeDecodeError:
            logger.warning(f"Skipping undecodable line {line_number} in {path}")

    logger.info(f"Read {len(passwords)} passwords from {path}")
    return passwords
