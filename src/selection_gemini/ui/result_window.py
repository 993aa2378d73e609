"""Result Window - Shows loading, result, and error views for one command."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QGuiApplication, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from selection_gemini.core import Failure, FailureKind, TaskKind


NO_TEXT_SELECTED_TITLE = "No Text Selected"
NO_TEXT_SELECTED_BODY = "Please select some text in another application and try again."
SETTINGS_HINT = "Fix your .env settings, then Refresh."


class ResultWindow(QWidget):
    """Window with the generated text and copy / refresh actions."""

    refresh_requested = Signal()

    def __init__(self, task: TaskKind):
        super().__init__()
        self.task = task
        self.setWindowTitle(f"Gemini - {task.labels.progress.rstrip('.')}")
        self.resize(640, 420)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(8)

        self.title_label = QLabel("")
        self.title_label.setStyleSheet("font-weight: bold;")
        main_layout.addWidget(self.title_label)

        self.body_text = QTextEdit()
        self.body_text.setReadOnly(True)
        self.body_text.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        main_layout.addWidget(self.body_text, 1)

        actions_layout = QHBoxLayout()
        self.copy_button = QPushButton(task.labels.copy_action)
        self.copy_button.clicked.connect(self._copy_result)
        self.copy_error_button = QPushButton("Copy Error Message")
        self.copy_error_button.clicked.connect(self._copy_error)
        self.refresh_button = QPushButton("Refresh")
        self.refresh_button.clicked.connect(self.refresh_requested.emit)
        actions_layout.addWidget(self.copy_button)
        actions_layout.addWidget(self.copy_error_button)
        actions_layout.addStretch()
        actions_layout.addWidget(self.refresh_button)
        main_layout.addLayout(actions_layout)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        main_layout.addWidget(self.status_label)

        refresh_shortcut = QShortcut(QKeySequence("Ctrl+R"), self)
        refresh_shortcut.activated.connect(self.refresh_requested.emit)
        copy_shortcut = QShortcut(QKeySequence("Ctrl+Shift+C"), self)
        copy_shortcut.activated.connect(self._copy_result)

        self.show_loading(task.labels.progress)

    def show_loading(self, label: str) -> None:
        """Show loading state while a run is in flight."""
        self.title_label.setText("")
        self.body_text.clear()
        self.body_text.setPlaceholderText(label)
        self.copy_button.setVisible(False)
        self.copy_error_button.setVisible(False)
        self.status_label.setText(label)
        self.status_label.setStyleSheet("color: gray;")

    def show_success(self, text: str) -> None:
        """Show generated text with the copy action."""
        self.title_label.setText("")
        self.body_text.setPlainText(text)
        self.copy_button.setVisible(True)
        self.copy_error_button.setVisible(False)
        self.status_label.setText(self.task.labels.success)
        self.status_label.setStyleSheet("color: gray;")

    def show_failure(self, failure: Failure) -> None:
        """Show an error view; NoInputSelected gets its own message."""
        self.copy_button.setVisible(False)
        if failure.kind is FailureKind.NO_INPUT_SELECTED:
            self.title_label.setText(NO_TEXT_SELECTED_TITLE)
            self.body_text.setPlainText(NO_TEXT_SELECTED_BODY)
            self.copy_error_button.setVisible(False)
            self.status_label.setText("Please select text before running the command.")
        else:
            self.title_label.setText("Error")
            self.body_text.setPlainText(failure.message)
            self.copy_error_button.setVisible(True)
            if failure.kind.retryable:
                self.status_label.setText(self.task.labels.failure)
            else:
                self.status_label.setText(SETTINGS_HINT)
        self.status_label.setStyleSheet("color: red;")

    def _copy_result(self) -> None:
        # Only a generated result; the clipboard may be the next run's input
        if self.copy_button.isHidden():
            return
        self._copy_body()

    def _copy_error(self) -> None:
        if self.copy_error_button.isHidden():
            return
        self._copy_body()

    def _copy_body(self) -> None:
        text = self.body_text.toPlainText()
        if text:
            QGuiApplication.clipboard().setText(text)
