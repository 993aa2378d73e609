"""Task kinds offered as commands, with the labels shown while they run."""

from dataclasses import dataclass
from enum import Enum


class TaskKind(Enum):
    """The three selection commands."""

    SUMMARIZE_JA = "summarize-ja"
    TRANSLATE_TO_EN = "translate-to-en"
    TRANSLATE_TO_JA = "translate-to-ja"

    @property
    def labels(self) -> "TaskLabels":
        return TASK_LABELS[self]


@dataclass(frozen=True)
class TaskLabels:
    """User-facing strings for one task."""

    progress: str
    success: str
    failure: str
    copy_action: str


TASK_LABELS: dict[TaskKind, TaskLabels] = {
    TaskKind.SUMMARIZE_JA: TaskLabels(
        progress="Summarizing in Japanese...",
        success="Summarization Complete",
        failure="Summarization Failed",
        copy_action="Copy Summary",
    ),
    TaskKind.TRANSLATE_TO_EN: TaskLabels(
        progress="Translating to English...",
        success="Translation Complete",
        failure="Translation Failed",
        copy_action="Copy English Translation",
    ),
    TaskKind.TRANSLATE_TO_JA: TaskLabels(
        progress="Translating to Japanese...",
        success="Translation Complete",
        failure="Translation Failed",
        copy_action="Copy Japanese Translation",
    ),
}
