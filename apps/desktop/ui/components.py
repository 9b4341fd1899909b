"""
Reusable widgets for the update status screen.
"""

from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QPropertyAnimation
from PySide6.QtWidgets import QFrame, QProgressBar, QPushButton, QVBoxLayout

PROGRESS_ANIMATION_MS = 400


class Card(QFrame):
    """Card container with rounded corners and subtle styling."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("Card")
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(16, 16, 16, 16)
        self.layout.setSpacing(12)


class SecondaryButton(QPushButton):
    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self.setObjectName("SecondaryButton")


class AnimatedProgressBar(QProgressBar):
    """0-100 bar that eases to each new value instead of jumping."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("LoadingBar")
        self.setRange(0, 100)
        self.setValue(0)
        self.setTextVisible(False)

        self._anim = QPropertyAnimation(self, b"value", self)
        self._anim.setDuration(PROGRESS_ANIMATION_MS)
        self._anim.setEasingCurve(QEasingCurve.OutCubic)

    def animate_to(self, value: int) -> None:
        # QProgressBar ignores out-of-range values, so clamp for display only
        target = max(self.minimum(), min(self.maximum(), value))
        self._anim.stop()
        self._anim.setStartValue(self.value())
        self._anim.setEndValue(target)
        self._anim.start()
