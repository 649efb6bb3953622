from .table_parser import parse, tokenize_line, split_lines, DEFAULT_DELIMITER
from .data_loader import select_data_file, read_text_file, load_table_from_file, file_info_for
from .sample_data import SAMPLE_CSV, write_sample_csv, save_sample_csv

# Lazy wrapper to avoid importing configuration at package import time (prevents circular imports)
def get_config(*args, **kwargs):
    from .configuration import get_config as _get_config
    return _get_config(*args, **kwargs)

__all__ = [
    "parse",
    "tokenize_line",
    "split_lines",
    "DEFAULT_DELIMITER",
    "select_data_file",
    "read_text_file",
    "load_table_from_file",
    "file_info_for",
    "SAMPLE_CSV",
    "write_sample_csv",
    "save_sample_csv",
    "get_config",
]
