"""
Update status screen.

Shows the tracker's snapshot (status, step, percentage, loading bar) and a
small settings card for the polling interval and theme.
"""

from __future__ import annotations

import logging
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QCheckBox,
    QSpinBox,
)

from packages.shared.config import AppConfig
from packages.shared.store import ConfigStore
from packages.core.tracker.service import UpdateTrackerService

from .theme import Theme
from .components import AnimatedProgressBar, Card, SecondaryButton

log = logging.getLogger(__name__)


class UpdateStatusWindow(QMainWindow):
    """Main window; also the display the tracker pushes snapshots into."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Update Tracker")
        self.resize(720, 480)
        self.setMinimumSize(480, 360)

        self.store = ConfigStore()
        self.cfg: AppConfig = self.store.load()

        self.theme = Theme("dark" if self.cfg.dark_mode else "light")

        self._build_ui()
        self._apply_theme()

        self.service = UpdateTrackerService(self.cfg, parent=self)
        self.service.attach_display(self)
        self.service.start()

    # StatusDisplay

    def set_status_text(self, text: str) -> None:
        self.status_label.setText(text)

    def set_step_text(self, text: str) -> None:
        self.step_label.setText(text)

    def set_progress_text(self, text: str) -> None:
        self.progress_label.setText(text)

    def set_progress_value(self, value: int) -> None:
        self.loading_bar.animate_to(value)

    # Layout

    def _apply_theme(self) -> None:
        self.setStyleSheet(self.theme.get_stylesheet())

    def _build_ui(self) -> None:
        root = QWidget()
        self.setCentralWidget(root)
        main_layout = QVBoxLayout(root)
        main_layout.setContentsMargins(24, 24, 24, 24)
        main_layout.setSpacing(20)

        self._build_status_card(main_layout)
        self._build_settings_card(main_layout)

    def _build_status_card(self, parent_layout: QVBoxLayout) -> None:
        card = Card()
        layout = card.layout

        title = QLabel("System Update")
        title.setObjectName("TitleLabel")
        layout.addWidget(title)

        self.progress_label = QLabel("0%")
        self.progress_label.setObjectName("ProgressLabel")
        self.progress_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.progress_label)

        self.loading_bar = AnimatedProgressBar()
        layout.addWidget(self.loading_bar)

        self.status_label = QLabel("")
        self.status_label.setObjectName("StatusLabel")
        self.status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.status_label)

        self.step_label = QLabel("")
        self.step_label.setObjectName("StepLabel")
        self.step_label.setAlignment(Qt.AlignCenter)
        self.step_label.setWordWrap(True)
        layout.addWidget(self.step_label)

        layout.addStretch()
        parent_layout.addWidget(card, 1)

    def _build_settings_card(self, parent_layout: QVBoxLayout) -> None:
        card = Card()
        layout = card.layout

        section = QLabel("Settings")
        section.setObjectName("SectionLabel")
        layout.addWidget(section)

        row = QHBoxLayout()
        row.setSpacing(12)

        interval_label = QLabel("Poll interval (ms):")
        interval_label.setObjectName("BodyLabel")
        row.addWidget(interval_label)

        self.spin_poll_interval = QSpinBox()
        self.spin_poll_interval.setRange(100, 60000)
        self.spin_poll_interval.setSingleStep(250)
        self.spin_poll_interval.setValue(self.cfg.poll_interval_ms)
        row.addWidget(self.spin_poll_interval)

        self.chk_dark_mode = QCheckBox("Dark mode")
        self.chk_dark_mode.setChecked(self.cfg.dark_mode)
        self.chk_dark_mode.toggled.connect(self._toggle_dark_mode)
        row.addWidget(self.chk_dark_mode)

        row.addStretch()

        self.btn_save = SecondaryButton("Save Settings")
        self.btn_save.clicked.connect(self._save_config)
        row.addWidget(self.btn_save)

        layout.addLayout(row)

        hint = QLabel(f"Status file: {self.cfg.resolved_status_path()}")
        hint.setObjectName("HintLabel")
        hint.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(hint)

        parent_layout.addWidget(card)

    # Actions

    def _toggle_dark_mode(self, checked: bool) -> None:
        self.theme.set_mode("dark" if checked else "light")
        self._apply_theme()

    def _save_config(self) -> None:
        self.service.set_polling_interval(int(self.spin_poll_interval.value()))
        self.cfg.dark_mode = self.chk_dark_mode.isChecked()
        self.store.save(self.cfg)
        log.info(f"Config saved to {self.store.path()}")

    def closeEvent(self, event) -> None:
        self.service.stop()
        super().closeEvent(event)
