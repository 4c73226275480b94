import argparse
import sys

from PyQt6 import QtWidgets

from config.theme import THEME, ColorTheme
from core.main_window import MainWindow
from utils.logger import configure_logging, setup_debug_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Stocks - company quote viewer")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    return parser.parse_known_args(argv)


def main():
    args, qt_args = parse_args()

    configure_logging()
    if args.debug:
        setup_debug_logging(True)

    app = QtWidgets.QApplication([sys.argv[0], *qt_args])
    # Set application font globally from THEME
    app.setFont(
        ColorTheme.qfont(
            int(THEME["ui_font_weight"]),
            int(THEME["ui_font_size"]),
        )
    )
    win = MainWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
