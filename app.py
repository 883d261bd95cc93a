import logging
import os
import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.paths import store_path
from BackEnd.repos.kv_store import JsonFileStore
from BackEnd.repos.history_repo import HistoryStore
from BackEnd.services.timer_service import TimerService
from FrontEnd.ui_main import MainWindow

def configure_logging():
    level = os.environ.get("BUBBLE_TIMER_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def main():
    configure_logging()
    app = QApplication(sys.argv)
    history = HistoryStore(JsonFileStore(store_path()))
    history.load()
    timer_service = TimerService(history)
    win = MainWindow(timer_service)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
