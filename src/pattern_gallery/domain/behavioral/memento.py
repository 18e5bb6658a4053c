"""Memento pattern - document snapshots kept in an undo history."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class DocumentMemento:
    """Immutable snapshot of a document's content."""
    content: str


class Document:
    """Originator: editable text that can save and restore snapshots."""

    def __init__(self, content: str = "") -> None:
        self._content = content

    @property
    def content(self) -> str:
        return self._content

    def write(self, text: str) -> None:
        self._content += text

    def save(self) -> DocumentMemento:
        return DocumentMemento(self._content)

    def restore(self, memento: DocumentMemento) -> None:
        self._content = memento.content


class History:
    """Caretaker: stack of mementos."""

    def __init__(self) -> None:
        self._mementos: List[DocumentMemento] = []

    def push(self, memento: DocumentMemento) -> None:
        self._mementos.append(memento)

    def pop(self) -> Optional[DocumentMemento]:
        """Take the most recent memento, or None when the history is empty."""
        if not self._mementos:
            return None
        return self._mementos.pop()

    def __len__(self) -> int:
        return len(self._mementos)
