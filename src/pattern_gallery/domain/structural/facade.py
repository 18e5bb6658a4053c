"""Facade pattern - one entry point in front of two subsystems."""


class SubsystemA:
    def operation_a(self) -> str:
        return "SubsystemA: Ready!"

    def operation_b(self) -> str:
        return "SubsystemA: Go!"


class SubsystemB:
    def operation_c(self) -> str:
        return "SubsystemB: Get ready!"

    def operation_d(self) -> str:
        return "SubsystemB: Fire!"


class Facade:
    """Simplified interface over ``SubsystemA`` and ``SubsystemB``."""

    def __init__(self, subsystem_a: SubsystemA, subsystem_b: SubsystemB) -> None:
        self._subsystem_a = subsystem_a
        self._subsystem_b = subsystem_b

    def operation_a(self) -> str:
        return self._subsystem_a.operation_a()

    def operation_b(self) -> str:
        return self._subsystem_a.operation_b()

    def operation_c(self) -> str:
        return self._subsystem_b.operation_c()

    def operation_d(self) -> str:
        return self._subsystem_b.operation_d()
