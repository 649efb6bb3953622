# dataio/sample_data.py
import os

from PySide6.QtWidgets import QFileDialog, QMessageBox

SAMPLE_FILENAME = "sample.csv"
SAMPLE_CSV = (
    "Depth,GR,RES,BulkDensity\n"
    "1000,80,55,2.65\n"
    "1002,85,50,2.67\n"
    "1004,88,75,2.68\n"
    "1006,90,44,2.64\n"
    "1008,76,120,2.66\n"
    "1010,81,52,2.63"
)


def write_sample_csv(path: str) -> str:
    """Write the sample table to *path* and return the path."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(SAMPLE_CSV)
    return path


def save_sample_csv(parent=None, folder=None):
    """Prompt for a location and save the sample table there."""
    start = os.path.join(folder or os.path.expanduser("~"), SAMPLE_FILENAME)
    save_path, _ = QFileDialog.getSaveFileName(parent, "Save Sample CSV", start, "CSV Files (*.csv)")
    if not save_path:
        return None

    write_sample_csv(save_path)

    if parent:
        QMessageBox.information(parent, "Saved", f"Sample CSV saved to:\n{save_path}")
    else:
        print(f"[INFO] Saved to {save_path}")
    return save_path
