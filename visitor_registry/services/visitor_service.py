"""Visitor persistence service: one JSON file per visitor."""
import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from visitor_registry.config import get_visitors_dir
from visitor_registry.models.visitor import Visitor
from visitor_registry.services.storage_service import (
    ensure_directory,
    load_json,
    save_json,
)
from visitor_registry.utils.exceptions import (
    FileReadError,
    FileWriteError,
    InvalidArgumentError,
)
from visitor_registry.utils.validation import normalize_name

logger = logging.getLogger(__name__)

FILE_PREFIX = "visitor_"
FILE_SUFFIX = ".json"


def visitor_file_name(name: str) -> str:
    """
    Derive the storage file name for a visitor.

    Args:
        name: Visitor's full name

    Returns:
        File name, e.g. "James Blake" → "visitor_james_blake.json"
    """
    return f"{FILE_PREFIX}{normalize_name(name)}{FILE_SUFFIX}"


def visitor_file_path(name: str, directory: Optional[Union[str, Path]] = None) -> Path:
    """Full path of a visitor's file inside the visitors directory."""
    base_dir = Path(directory) if directory is not None else get_visitors_dir()
    return base_dir / visitor_file_name(name)


async def save(visitor: Visitor, directory: Optional[Union[str, Path]] = None) -> Path:
    """
    Persist a visitor to its JSON file.

    Args:
        visitor: Validated visitor to store
        directory: Visitors directory (default: configured VISITORS_DIR)

    Returns:
        Path of the written file

    Raises:
        FileWriteError: If the directory or file cannot be written

    Behavior:
        - Creates the visitors directory when missing
        - Overwrites any file already stored under the same name
        - Prints a confirmation naming the file
    """
    file_path = visitor_file_path(visitor.full_name, directory)
    data = visitor.to_dict()

    def _write() -> None:
        ensure_directory(file_path.parent)
        save_json(file_path, data)

    try:
        await asyncio.to_thread(_write)
    except Exception as e:
        logger.error(f"Failed to save visitor file {file_path}: {e}")
        raise FileWriteError(f"Error saving file: {e}") from e

    logger.info(f"Saved visitor file {file_path}")
    print(f"{file_path.name} is saved successfully!")
    return file_path


async def load(name: Any, directory: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Read a visitor's stored fields.

    Args:
        name: Visitor's full name
        directory: Visitors directory (default: configured VISITORS_DIR)

    Returns:
        dict: Stored fields as written, not re-validated

    Raises:
        InvalidArgumentError: If name is not a non-empty string (no I/O done)
        FileReadError: If the file is missing, unreadable or malformed
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(
            "load expects a non-empty string of the visitor's full name"
        )

    file_path = visitor_file_path(name, directory)

    try:
        data = await asyncio.to_thread(load_json, file_path)
    except Exception as e:
        logger.error(f"Failed to load visitor file {file_path}: {e}")
        raise FileReadError(
            f"An error occurred while loading the visitor file: {e}"
        ) from e

    logger.info(f"Loaded visitor file {file_path}: {data}")
    return data
