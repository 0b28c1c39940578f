"""Configuration management for regionstats.

This module centralizes file-system paths, environment variables, and the JSON
configuration loaders used by the ingestion and reporting pipeline.

Configuration files
-------------------
* ``config.json``: program metadata and output defaults
* ``datasets.json``: dataset catalogue (files, format tags, column mappings)

Environment variables
---------------------
``DATA_DIR``, ``OUTPUT_DIR``, ``LOGS_DIR``, and ``CONFIG_DIR`` override the
default directories. Output and log directories are created eagerly on import
so downstream callers can rely on their existence.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, cast

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_DIR = Path(os.getenv("CONFIG_DIR", PROJECT_ROOT / "config"))
DATA_DIR = Path(os.getenv("DATA_DIR", PROJECT_ROOT / "datasets"))
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", PROJECT_ROOT / "output"))
LOGS_DIR = Path(os.getenv("LOGS_DIR", PROJECT_ROOT / "logs"))

# Ensure directories exist
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
LOGS_DIR.mkdir(parents=True, exist_ok=True)


def _load_config_file(filename: str) -> dict[str, Any]:
    """Load a JSON file from ``CONFIG_DIR``.

    Parameters
    ----------
    filename : str
        Config filename (e.g., ``"datasets.json"``).

    Returns
    -------
    dict[str, Any]
        Parsed JSON configuration.

    Raises
    ------
    FileNotFoundError
        If the file is missing.
    json.JSONDecodeError
        If the file exists but is not valid JSON.
    """
    config_path = CONFIG_DIR / filename
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open(encoding="utf-8") as f:
        return cast("dict[str, Any]", json.load(f))


def get_config() -> dict[str, Any]:
    """Load the primary project configuration.

    Returns
    -------
    dict[str, Any]
        Parsed contents of ``config/config.json`` including the program name
        and the default report format.
    """
    return _load_config_file("config.json")


def get_dataset_catalogue() -> dict[str, Any]:
    """Load the dataset catalogue from ``datasets.json``.

    Returns
    -------
    dict[str, Any]
        Mapping with an ``areas`` entry (the reference dataset) and a
        ``datasets`` list describing every importable statistics file.
    """
    return _load_config_file("datasets.json")


def get_program_name() -> str:
    """Return the program name shown in CLI help and logs."""
    return cast("str", get_config().get("program", {}).get("name", "regionstats"))


def setup_logging(name: str = "regionstats") -> logging.Logger:
    """Configure a console+file logger if not already present.

    Parameters
    ----------
    name : str, optional
        Logger namespace; reused to avoid duplicate handlers.

    Returns
    -------
    logging.Logger
        Logger with INFO-level console handler and DEBUG-level daily file
        handler under ``LOGS_DIR``.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_format = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(console_format)
        logger.addHandler(console_handler)

        # File handler
        log_filename = f"{datetime.now(UTC).strftime('%Y-%m-%d')}_run.log"
        file_handler = logging.FileHandler(LOGS_DIR / log_filename, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger
