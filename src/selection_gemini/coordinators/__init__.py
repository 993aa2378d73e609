"""Coordinators - Orchestration layer connecting the window with the services."""

from .command_coordinator import CommandCoordinator, CommandState

__all__ = [
    "CommandCoordinator",
    "CommandState",
]
