"""
Utility functions and helpers for the capability registry.
Includes logging setup and JSON file handling.
"""

import logging
import json
import os
import sys
from typing import Any, Optional

from config.settings import settings

def setup_logging(log_file: Optional[str] = None, level: Optional[str] = None):
    """
    Set up logging configuration for the application.

    Args:
        log_file: Optional file that receives a copy of every log line
        level: Log level name, defaults to LOG_LEVEL
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper()),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )

    # Suppress some noisy loggers
    logging.getLogger("redis").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging system initialized")

def save_json_to_file(data: Any, file_path: str) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Data to save
        file_path: Output file path

    Returns:
        True if successful, False otherwise
    """
    try:
        # Serialize before touching the file so a bad payload leaves it intact
        payload = json.dumps(data, indent=2, ensure_ascii=False)
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        temp_path = f"{file_path}.tmp"
        with open(temp_path, 'w', encoding='utf-8') as f:
            f.write(payload)
        os.replace(temp_path, file_path)
        logger = logging.getLogger(__name__)
        logger.debug(f"Data saved to {file_path}")
        return True
    except (OSError, TypeError, ValueError) as e:
        logger = logging.getLogger(__name__)
        logger.error(f"Error saving JSON to {file_path}: {e}")
        return False

def load_json_from_file(file_path: str) -> Optional[Any]:
    """
    Load data from JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Loaded data or None if error
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger = logging.getLogger(__name__)
        logger.debug(f"Data loaded from {file_path}")
        return data
    except (OSError, ValueError) as e:
        logger = logging.getLogger(__name__)
        logger.error(f"Error loading JSON from {file_path}: {e}")
        return None
