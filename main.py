# main.py
import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from models import ModelState
from view.main_window import MainWindow
from viewmodel.crossplot_vm import CrossplotViewModel
from viewmodel.logging_helpers import log_message


def main(argv=None):
    argv = list(sys.argv if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(argv)

    # Model + ViewModel + View
    model_state = ModelState()
    viewmodel = CrossplotViewModel(model_state)
    window = MainWindow(viewmodel)

    # Optional file given on the command line
    if len(argv) > 1:
        path = argv[1]
        if os.path.isfile(path):
            viewmodel.handle_action("request_file", path=path)
        else:
            log_message(f"File not found: {path}", vm=viewmodel)

    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
