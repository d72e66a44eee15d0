"""Background thread that runs one project creation off the GUI thread."""

from __future__ import annotations

import asyncio

from PyQt5.QtCore import QThread, pyqtSignal

from newpipi.models import NewpipiError, ProjectRequest
from newpipi.pipeline import ProjectCreator
from newpipi.utils import console


class CreateProjectWorker(QThread):
    """Runs ``ProjectCreator.create`` in its own event loop.

    Signals are delivered to the GUI thread through Qt's queued connections,
    so the window never touches widgets from this thread.
    """

    status = pyqtSignal(str)
    completed = pyqtSignal(bool, str)

    def __init__(self, creator: ProjectCreator, request: ProjectRequest, parent=None) -> None:
        super().__init__(parent)
        self.creator = creator
        self.request = request

    def run(self) -> None:
        try:
            project_dir = asyncio.run(
                self.creator.create(self.request, on_status=self.status.emit)
            )
        except NewpipiError as exc:
            self.completed.emit(False, f"Error: {exc}")
        except Exception as exc:
            console.print_exception()
            self.completed.emit(False, f"Unexpected error: {exc}")
        else:
            self.completed.emit(True, f"Project created: {project_dir}")
