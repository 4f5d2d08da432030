from __future__ import annotations

import logging
from typing import Any, Callable, Dict
from PySide6 import QtCore

from ..errors import WindCoeffError


class Recompute(QtCore.QObject):
    """Run ``fn`` once input edits have been quiet for ``ms``.

    Input errors (WindCoeffError) come back on ``failed`` with the first line of
    the message; anything else propagates to the Qt event loop.
    """
    done = QtCore.Signal(dict)
    failed = QtCore.Signal(str)

    def __init__(self, fn: Callable[[], Dict[str, Any]], ms: int = 250, parent=None):
        super().__init__(parent)
        self.fn = fn
        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(ms)
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(self.run_now)

    def pulse(self):
        self.timer.start()

    def run_now(self):
        self.timer.stop()
        try:
            payload = self.fn()
        except WindCoeffError as e:
            logging.getLogger(__name__).warning("recompute rejected: %s", e)
            self.failed.emit(str(e).splitlines()[0])
            return
        self.done.emit(payload)
