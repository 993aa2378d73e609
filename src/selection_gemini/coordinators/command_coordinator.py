"""Command Coordinator - Runs one selection command and tracks its display state."""

import logging
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from selection_gemini.core import Failure, FailureKind, InvocationResult, Success, TaskKind
from selection_gemini.services import (
    CommandPipeline,
    CommandWorker,
    FixedSelectionProvider,
    SelectionProvider,
)


logger = logging.getLogger(__name__)


class CommandState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class _RunRequest(QObject):
    """Helper class to hold run context and deliver results on the coordinator's thread."""

    def __init__(self, run_id: int, parent: "CommandCoordinator"):
        super().__init__()
        self.run_id = run_id
        self.parent_ref = parent

    @Slot(object)
    def on_result(self, result):
        self.parent_ref._handle_result(result, self.run_id)

    @Slot(str)
    def on_error(self, error: str):
        self.parent_ref._handle_error(error, self.run_id)

    @Slot()
    def on_finished(self):
        self.parent_ref._release_request(self.run_id)


class CommandCoordinator(QObject):
    """
    Orchestrates one command (summarize / translate) for the presentation layer.

    Responsibilities:
    - Start a run on activation and on every refresh.
    - Read the selection on the GUI thread, then run the pipeline on the pool.
    - Tag runs with increasing ids and drop completions from superseded runs.
    - Emit started / succeeded / failed for the window to render.
    """

    run_started = Signal(str)  # progress label
    run_succeeded = Signal(str)  # generated text
    run_failed = Signal(object)  # Failure

    def __init__(
        self,
        task: TaskKind,
        pipeline: CommandPipeline,
        selection_provider: SelectionProvider,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.task = task
        self.pipeline = pipeline
        self.selection_provider = selection_provider
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.state = CommandState.IDLE
        self.result: Optional[InvocationResult] = None

        self._run_counter = 0
        self._active_run_id: Optional[int] = None

        # Helpers must outlive their worker so queued results still have a receiver
        self._request_helpers: dict[int, _RunRequest] = {}

    def start(self) -> int:
        """
        Start a new run, superseding any run still in flight.

        Returns:
            The id assigned to the new run.
        """
        self._run_counter += 1
        run_id = self._run_counter
        self._active_run_id = run_id

        self.state = CommandState.RUNNING
        self.result = None
        self.run_started.emit(self.task.labels.progress)

        selection = FixedSelectionProvider.capture(self.selection_provider)
        worker = CommandWorker(
            pipeline=self.pipeline,
            task=self.task,
            selection_provider=selection,
        )

        request_helper = _RunRequest(run_id, self)
        self._request_helpers[run_id] = request_helper

        worker.signals.result.connect(request_helper.on_result)
        worker.signals.error.connect(request_helper.on_error)
        worker.signals.finished.connect(request_helper.on_finished)

        logger.debug("Starting %s run %d", self.task.value, run_id)
        self.thread_pool.start(worker)
        return run_id

    def refresh(self) -> int:
        """User-triggered retry; identical to start()."""
        return self.start()

    def _handle_result(self, result: InvocationResult, run_id: int) -> None:
        """Apply a run's result if it belongs to the latest run."""
        if run_id != self._active_run_id:
            logger.debug(
                "Ignoring stale result (run %d, current %s)", run_id, self._active_run_id
            )
            return

        self.result = result
        if isinstance(result, Success):
            self.state = CommandState.SUCCEEDED
            self.run_succeeded.emit(result.text)
        else:
            self.state = CommandState.FAILED
            self.run_failed.emit(result)

    def _handle_error(self, error: str, run_id: int) -> None:
        """Unclassified worker errors surface as Unknown failures."""
        self._handle_result(Failure(FailureKind.UNKNOWN, error), run_id)

    def _release_request(self, run_id: int) -> None:
        self._request_helpers.pop(run_id, None)
