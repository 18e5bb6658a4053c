"""Adapter pattern - expose an existing class through the ``Task`` interface."""

from abc import ABC, abstractmethod


class Task(ABC):
    """Interface clients expect."""

    @abstractmethod
    def execute(self) -> str:
        """Run the task."""


class AggregatedTask:
    """Existing class with an incompatible interface."""

    def run_task(self) -> str:
        return "Executing aggregated task"


class TaskAdapter(Task):
    """Makes an ``AggregatedTask`` usable wherever a ``Task`` is expected."""

    def __init__(self, aggregated_task: AggregatedTask) -> None:
        self._aggregated_task = aggregated_task

    def execute(self) -> str:
        return self._aggregated_task.run_task()
