"""Chain of Responsibility pattern - a request travels along handlers until one takes it."""

from typing import Optional


class Handler:
    """Base handler: forwards to the next handler, or reports that nobody handled the request."""

    def __init__(self) -> None:
        self._next_handler: Optional["Handler"] = None

    def set_next(self, handler: "Handler") -> "Handler":
        """Link ``handler`` after this one and return it, so chains can be built fluently."""
        self._next_handler = handler
        return handler

    def handle(self, request: str) -> str:
        if self._next_handler is not None:
            return self._next_handler.handle(request)
        return f"No handler could process the request: {request}"


class AuthHandler(Handler):
    def handle(self, request: str) -> str:
        if request == "auth":
            return "AuthHandler: Handling authentication."
        return super().handle(request)


class LoggingHandler(Handler):
    def handle(self, request: str) -> str:
        if request == "log":
            return "LoggingHandler: Handling logging."
        return super().handle(request)


class ValidationHandler(Handler):
    def handle(self, request: str) -> str:
        if request == "validate":
            return "ValidationHandler: Handling validation."
        return super().handle(request)
