"""Low-level JSON file I/O operations."""
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

PathLike = Union[str, Path]


def ensure_directory(dir_path: PathLike) -> None:
    """Create a directory and its parents if they do not exist."""
    os.makedirs(dir_path, exist_ok=True)


def load_json(file_path: PathLike) -> Dict[str, Any]:
    """
    Load and parse JSON file with UTF-8 encoding.

    Args:
        file_path: Path to JSON file

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Malformed JSON in {file_path}: {e.msg}",
                e.doc,
                e.pos
            )


def save_json(file_path: PathLike, data: Dict[str, Any]) -> None:
    """
    Save data to JSON file with UTF-8 encoding, replacing any existing file.

    Args:
        file_path: Path to JSON file
        data: Dictionary to save, written in its own key order

    Returns:
        None

    Raises:
        IOError: If write operation fails
    """
    dir_path = os.path.dirname(file_path)

    try:
        temp_fd, temp_path = tempfile.mkstemp(
            dir=dir_path if dir_path else ".",
            prefix=".tmp_",
            suffix=".json"
        )
    except OSError as e:
        raise IOError(f"Failed to write file {file_path}: {e}") from e

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())

        os.replace(temp_path, file_path)

    except Exception as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}") from e
