from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional
from PySide6 import QtCore, QtWidgets

from .app import App

# pyqtgraph emits this while the Cp plot is rebuilt between recomputes
_QT_NOISE = "QGraphicsItem::itemTransform: null pointer passed"


def _install_qt_warning_filter() -> None:
    def _handler(mode, context, message: str):  # type: ignore[no-untyped-def]
        if _QT_NOISE in message:
            return
        sys.stderr.write(message + "\n")

    QtCore.qInstallMessageHandler(_handler)


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(prog="windcoeff-gui", description="Roof pressure coefficient viewer")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging (reports clamped queries)")
    args, qt_args = p.parse_known_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _install_qt_warning_filter()
    app = QtWidgets.QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("WindCoeffTool")
    win = App()
    win.resize(1200, 720)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
