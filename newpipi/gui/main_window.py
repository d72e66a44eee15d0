"""The newpipi project-setup window."""

from __future__ import annotations

import sys
from pathlib import Path

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtWidgets import (QApplication, QButtonGroup, QFileDialog, QGridLayout,
                             QHBoxLayout, QLabel, QLineEdit, QMainWindow,
                             QProgressBar, QPushButton, QRadioButton, QVBoxLayout,
                             QWidget)

from newpipi.config import AppConfig, load_last_path, save_last_path
from newpipi.disk import project_preview
from newpipi.gui.worker import CreateProjectWorker
from newpipi.models import ConfigIOFailed, Language, ProjectRequest, ValidationError
from newpipi.pipeline import ProjectCreator
from newpipi.utils import print_success, print_warning, truncate_message
from newpipi.validator import filter_name, validate_name


class MainWindow(QMainWindow):
    def __init__(self, config: AppConfig | None = None, creator: ProjectCreator | None = None):
        super().__init__()
        self.config = config or AppConfig()
        self.creator = creator or ProjectCreator(self.config)
        self.parent_path: Path | None = None
        self.worker: CreateProjectWorker | None = None
        self.running = False

        try:
            self.parent_path = load_last_path(self.config.config_file)
        except ConfigIOFailed as exc:
            print_warning(str(exc))

        # The status line owns its own clear timer; every new message restarts it.
        self.status_timer = QTimer(self)
        self.status_timer.setSingleShot(True)

        self.init_ui()
        self.status_timer.timeout.connect(self.status_label.clear)
        self.refresh_create_button()

    def init_ui(self):
        self.setWindowTitle("Project Setup")
        self.setFixedSize(500, 300)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        title = QLabel("Project Setup")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        # Language selector
        language_layout = QHBoxLayout()
        self.language_group = QButtonGroup(self)
        self.language_buttons: dict[Language, QRadioButton] = {}
        for language in Language:
            button = QRadioButton(language.label)
            self.language_group.addButton(button)
            self.language_buttons[language] = button
            language_layout.addWidget(button)
        self.language_buttons[Language.PYTHON].setChecked(True)
        layout.addLayout(language_layout)

        # Parent path and project name
        form = QGridLayout()
        form.addWidget(QLabel("Parent Path:"), 0, 0)
        self.parent_button = QPushButton(self._parent_button_text())
        self.parent_button.clicked.connect(self.choose_parent_path)
        form.addWidget(self.parent_button, 0, 1)

        form.addWidget(QLabel("Project Name:"), 1, 0)
        self.name_input = QLineEdit()
        self.name_input.setMaxLength(255)
        self.name_input.textChanged.connect(self.on_name_changed)
        form.addWidget(self.name_input, 1, 1)
        layout.addLayout(form)

        self.create_button = QPushButton("Create Project")
        self.create_button.clicked.connect(self.create_project)
        layout.addWidget(self.create_button)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 0)
        self.progress_bar.hide()
        layout.addWidget(self.progress_bar)

        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.status_label)

    # -- State helpers -----------------------------------------------------

    def _parent_button_text(self):
        return str(self.parent_path) if self.parent_path else "Choose folder..."

    def selected_language(self) -> Language:
        checked = self.language_group.checkedButton()
        if checked is None:
            return Language.PYTHON
        return Language.from_label(checked.text().replace("&", ""))

    def build_request(self) -> ProjectRequest:
        return ProjectRequest(
            parent_path=self.parent_path or Path(),
            project_name=self.name_input.text(),
            language=self.selected_language(),
        )

    def show_status(self, message: str):
        self.status_label.setText(truncate_message(message, self.config.status_max_length))
        self.status_label.setToolTip(message)
        self.status_timer.start(self.config.status_timeout_ms)

    def refresh_create_button(self):
        try:
            validate_name(self.name_input.text())
            name_ok = True
        except ValidationError:
            name_ok = False
        enabled = name_ok and self.parent_path is not None and not self.running
        self.create_button.setEnabled(enabled)
        if enabled:
            self.create_button.setToolTip(project_preview(self.build_request()))

    def set_inputs_enabled(self, enabled: bool):
        for button in self.language_buttons.values():
            button.setEnabled(enabled)
        self.parent_button.setEnabled(enabled)
        self.name_input.setEnabled(enabled)

    # -- Slots -------------------------------------------------------------

    def on_name_changed(self, text: str):
        filtered = filter_name(text)
        if filtered != text:
            try:
                validate_name(text)
            except ValidationError as exc:
                self.show_status(str(exc))
            self.name_input.setText(filtered)
            return
        self.refresh_create_button()

    def choose_parent_path(self):
        start = str(self.parent_path) if self.parent_path else str(Path.home())
        folder = QFileDialog.getExistingDirectory(self, "Select Parent Directory", start)
        if not folder:
            return
        self.parent_path = Path(folder)
        self.parent_button.setText(self._parent_button_text())
        try:
            save_last_path(self.parent_path, self.config.config_file)
        except ConfigIOFailed as exc:
            print_warning(str(exc))
            self.show_status(str(exc))
        self.refresh_create_button()

    def create_project(self):
        if self.running:
            return
        self.running = True
        self.create_button.setEnabled(False)
        self.set_inputs_enabled(False)
        self.progress_bar.show()
        self.show_status("Creating project...")

        self.worker = CreateProjectWorker(self.creator, self.build_request())
        self.worker.status.connect(self.show_status)
        self.worker.completed.connect(self.on_creation_finished)
        self.worker.start()

    def on_creation_finished(self, success: bool, message: str):
        self.running = False
        self.progress_bar.hide()
        self.show_status(message)
        if success:
            print_success(message)
            QApplication.quit()
            return
        self.set_inputs_enabled(True)
        self.refresh_create_button()


def main():
    app = QApplication(sys.argv)
    app.setApplicationName("newpipi")
    window = MainWindow(AppConfig.from_env())
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
