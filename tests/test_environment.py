"""Environment validation tests for regionstats."""

import sys


def test_python_version() -> None:
    """Verify Python version is 3.12 or higher."""
    assert sys.version_info >= (3, 12), f"Python 3.12+ required, got {sys.version}"


def test_core_imports() -> None:
    """Verify core packages can be imported."""
    import dotenv  # noqa: F401
    import httpx  # noqa: F401
    import openpyxl  # noqa: F401
    import pandas as pd  # noqa: F401


def test_project_structure() -> None:
    """Verify project module structure."""
    from regionstats import __version__, get_version
    from regionstats.config import PROJECT_ROOT

    assert __version__ == "0.1.0"
    assert get_version() == __version__
    assert PROJECT_ROOT.exists()


def test_config_loads() -> None:
    """Verify config.json and datasets.json can be loaded."""
    from regionstats.config import get_config, get_dataset_catalogue

    assert "program" in get_config()
    catalogue = get_dataset_catalogue()
    assert "areas" in catalogue
    assert "datasets" in catalogue


def test_output_directories_exist() -> None:
    """Verify output and log directories are created on import."""
    from regionstats.config import LOGS_DIR, OUTPUT_DIR

    assert OUTPUT_DIR.exists()
    assert LOGS_DIR.exists()
