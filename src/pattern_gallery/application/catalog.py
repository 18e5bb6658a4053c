"""Demo catalog - registry of runnable pattern demonstrations."""

import threading
from enum import Enum
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pattern_gallery.domain.core.exceptions import PatternNotFoundError
from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.patterns.instance_registry import InstanceRegistry

DemoRunner = Callable[[InstanceRegistry], List[str]]


class PatternCategory(str, Enum):
    """Design pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternDemo(BaseModel):
    """A registered demonstration of one pattern."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Slug used on the command line")
    title: str = Field(..., description="Human readable pattern name")
    category: PatternCategory
    summary: str = Field("", description="One-line description of the pattern")
    runner: DemoRunner = Field(..., exclude=True)

    def describe(self) -> Dict[str, str]:
        """Metadata of the demo, without the runner."""
        return {
            "name": self.name,
            "title": self.title,
            "category": self.category.value,
            "summary": self.summary,
        }


class DemoResult(BaseModel):
    """Output of one demo run."""
    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    category: PatternCategory
    lines: List[str] = Field(default_factory=list)


class DemoCatalog:
    """Registry for pattern demos, kept in registration order."""

    def __init__(self):
        """Initialize demo catalog."""
        self._demos: Dict[str, PatternDemo] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, demo: PatternDemo) -> None:
        """
        Register a pattern demo.

        Args:
            demo: Demo to register; replaces any demo with the same name
        """
        with self._lock:
            if demo.name in self._demos:
                self.logger.warning("Overriding existing pattern demo", name=demo.name)

            self._demos[demo.name] = demo
            self.logger.debug("Registered pattern demo", name=demo.name, category=demo.category.value)

    def get(self, name: str) -> PatternDemo:
        """
        Get a registered demo.

        Args:
            name: Demo name

        Returns:
            The registered demo

        Raises:
            PatternNotFoundError: If no demo is registered under that name
        """
        with self._lock:
            demo = self._demos.get(name)
            if demo is None:
                raise PatternNotFoundError(name, list(self._demos))
            return demo

    def list_demos(self, category: Optional[PatternCategory] = None) -> List[PatternDemo]:
        """List demos, optionally restricted to one category."""
        with self._lock:
            demos = list(self._demos.values())
        if category is None:
            return demos
        return [demo for demo in demos if demo.category == category]

    def names(self) -> List[str]:
        """List registered demo names."""
        with self._lock:
            return list(self._demos)

    def is_registered(self, name: str) -> bool:
        """Check if a demo is registered."""
        with self._lock:
            return name in self._demos

    def run(self, name: str, registry: InstanceRegistry) -> DemoResult:
        """
        Run a demo.

        Args:
            name: Demo name
            registry: Shared-instance registry handed to the demo

        Returns:
            The lines produced by the demo

        Raises:
            PatternNotFoundError: If no demo is registered under that name
        """
        demo = self.get(name)
        self.logger.info("Running pattern demo", name=name)
        lines = demo.runner(registry)
        return DemoResult(name=demo.name, title=demo.title, category=demo.category, lines=lines)

    def __len__(self) -> int:
        with self._lock:
            return len(self._demos)
