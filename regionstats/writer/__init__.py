"""Writer module for JSON, CSV, and Excel output.

``to_json`` returns the structured export as a string; the ``save``/``write``
functions persist it under ``OUTPUT_DIR`` unless a path is given.
"""

from regionstats.writer.export_writer import (
    EXPORT_SUFFIXES,
    save_export_json,
    to_json,
    write_collection_to_csv,
    write_collection_to_excel,
    write_export,
)

__all__ = [
    "EXPORT_SUFFIXES",
    "save_export_json",
    "to_json",
    "write_collection_to_csv",
    "write_collection_to_excel",
    "write_export",
]
