"""Async workers for non-blocking command runs using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from selection_gemini.core import TaskKind
from selection_gemini.services.command_pipeline import CommandPipeline
from selection_gemini.services.selection import SelectionProvider


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    result = Signal(object)  # InvocationResult


class CommandWorker(QRunnable):
    """
    Worker that runs one command pipeline in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when the run completes or fails unexpectedly.
    """

    def __init__(
        self,
        pipeline: CommandPipeline,
        task: TaskKind,
        selection_provider: SelectionProvider,
    ):
        super().__init__()
        self.pipeline = pipeline
        self.task = task
        self.selection_provider = selection_provider
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the pipeline in background thread."""
        try:
            result = self.pipeline.run(self.task, self.selection_provider)
            self.signals.result.emit(result)
        except Exception as e:
            # Anything the services did not classify
            self.signals.error.emit(f"Unexpected error: {str(e)}")
        finally:
            self.signals.finished.emit()
