# worker/file_reader.py
from PySide6.QtCore import QThread, Signal

from dataio.data_loader import read_text_file, file_info_for
from models.errors import ReadFailureError


class FileReadWorker(QThread):
    """Read one file off the GUI thread.

    Results carry the request token they were started with so the receiver
    can ignore reads that a newer request has superseded. Parsing is left to
    the receiver.
    """

    text_loaded = Signal(int, str, object)   # token, text, file_info
    error_occurred = Signal(int, str)        # token, message

    def __init__(self, path: str, token: int):
        super().__init__()
        self.path = str(path)
        self.token = int(token)

    def run(self):
        try:
            text = read_text_file(self.path)
        except ReadFailureError as e:
            self.error_occurred.emit(self.token, str(e))
            return
        self.text_loaded.emit(self.token, text, file_info_for(self.path))
