"""Domain layer - Pure value types shared by services and coordinators."""

from .configuration import AuthMethod, Configuration
from .credentials import ApiKeyCredentials, CloudIdentityCredentials, ResolvedCredentials
from .invocation_result import Failure, FailureKind, InvocationResult, Success
from .task_kind import TaskKind, TaskLabels

__all__ = [
    "AuthMethod",
    "Configuration",
    "ApiKeyCredentials",
    "CloudIdentityCredentials",
    "ResolvedCredentials",
    "Failure",
    "FailureKind",
    "InvocationResult",
    "Success",
    "TaskKind",
    "TaskLabels",
]
