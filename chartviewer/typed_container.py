"""A container that builds objects by the interface type they satisfy."""

from __future__ import annotations

import enum
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, TypeVar

T = TypeVar("T")


class TypeContainer:
    """Resolves objects by interface, building their dependencies on demand."""

    def __init__(self) -> None:
        self._factories: dict[type, Callable[[], Any]] = {}

    def register_instance(self, interface: type[T], instance: T) -> None:
        """Always hand out ``instance`` for ``interface``."""
        self._factories[interface] = lambda: instance

    def register_functor(
        self, interface: type[T], functor: Callable[..., T], *args: type
    ) -> None:
        """Build ``interface`` by calling ``functor`` with resolved ``args`` types."""
        dependencies = tuple(args)
        self._factories[interface] = lambda: functor(
            *(self.get(dependency) for dependency in dependencies)
        )

    def register_factory(
        self, interface: type[T], concrete: Callable[..., T], *args: type
    ) -> None:
        """Build a new ``concrete`` for each request, injecting ``args`` types."""
        self.register_functor(interface, concrete, *args)

    def get(self, interface: type[T]) -> T:
        """Return an object for ``interface``."""
        try:
            factory = self._factories[interface]
        except KeyError:
            raise LookupError(
                f"No registration for {interface.__name__}"
            ) from None
        return factory()


class ProcessorType(enum.Enum):
    X86 = "x86"
    X64 = "x64"


class Processor(ABC):
    @abstractmethod
    def processor_info(self) -> str:
        """Describe the processor."""


@dataclass
class IntelProcessor(Processor):
    version: str
    type: ProcessorType
    speed: float

    def processor_info(self) -> str:
        return f"Processor for {self.version} {self.speed:g}GHz {self.type.value}"


@dataclass
class Computer:
    processor: Processor

    def processor_info(self) -> str:
        return self.processor.processor_info()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Wire a computer to its processor through the container and describe it."""
    container = TypeContainer()
    container.register_instance(
        Processor, IntelProcessor("Intel Core i7", ProcessorType.X64, 3.2)
    )
    container.register_factory(Computer, Computer, Processor)
    computer = container.get(Computer)
    print(computer.processor_info())
    return 0


if __name__ == "__main__":
    sys.exit(main())