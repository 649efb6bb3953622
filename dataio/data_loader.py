# dataio/data_loader.py
import os
from typing import Optional

from PySide6.QtWidgets import QFileDialog

from models.errors import ReadFailureError
from models.table import ParsedTable
from .table_parser import parse, DEFAULT_DELIMITER

DATA_FILE_FILTER = "CSV Files (*.csv);;Text Files (*.txt *.dat);;All Files (*)"


def resolve_default_input_dir():
    """Find a good default input directory."""
    # Prefer the configured default_load_folder when available
    try:
        # import wrapper from package to avoid importing submodule at module-import time
        from dataio import get_config
        cfg = get_config()
        cfg_folder = cfg.default_load_folder or None
        if cfg_folder and os.path.isdir(cfg_folder):
            return cfg_folder
    except Exception:
        # fall back if config not available
        pass

    # Next try environment variable
    env = os.environ.get("CROSSPLOT_INPUT_DIR")
    if env and os.path.isdir(env):
        return env

    # Finally, use ~/Documents
    docs = os.path.join(os.path.expanduser("~"), "Documents")
    return docs


def file_info_for(filepath: str) -> dict:
    info = {"path": filepath, "name": os.path.basename(filepath)}
    try:
        info["size"] = os.path.getsize(filepath)
    except OSError:
        info["size"] = None
    return info


def read_text_file(filepath: str) -> str:
    """Return the contents of *filepath* as text.

    Undecodable bytes are replaced rather than rejected; a leading BOM is dropped.
    Raises ReadFailureError if the file cannot be opened or read.
    """
    try:
        with open(filepath, "r", encoding="utf-8-sig", errors="replace", newline="") as fh:
            return fh.read()
    except OSError as e:
        raise ReadFailureError(f"Failed to read file {os.path.basename(filepath)}: {e.strerror or e}") from e


def load_table_from_file(filepath: str, delimiter: str = DEFAULT_DELIMITER):
    """Read and parse *filepath*. Returns ``(table, file_info)``."""
    text = read_text_file(filepath)
    table: ParsedTable = parse(text, delimiter)
    return table, file_info_for(filepath)


def select_data_file(parent=None) -> Optional[str]:
    """Show a file dialog and return the chosen path, or None when cancelled."""
    input_dir = resolve_default_input_dir()
    filepath, _ = QFileDialog.getOpenFileName(parent, "Select CSV File", input_dir, DATA_FILE_FILTER)
    return filepath or None
