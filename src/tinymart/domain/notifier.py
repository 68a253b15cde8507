"""Abstract outlet for everything the domain wants a human to see.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (logging, console) live in
the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinymart.domain.model.cart import CartReport


class Notifier(ABC):

    @abstractmethod
    def info(self, message: str) -> None:
        """An expected rejection, e.g. adding to a full cart."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """An input was corrected, e.g. a clamped price."""

    @abstractmethod
    def report(self, report: CartReport) -> None:
        """Publish a finished cart report."""
