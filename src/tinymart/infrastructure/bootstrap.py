"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from tinymart.config import AppConfig
from tinymart.domain.notifier import Notifier
from tinymart.domain.service.product_factory import ProductFactory
from tinymart.infrastructure.cli.console_notifier import ConsoleNotifier
from tinymart.infrastructure.logging_notifier import LoggingNotifier
from tinymart.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tinymart.infrastructure.sample_catalog import build_sample_catalog


def notifier(config: AppConfig) -> Notifier:
    if config.output == "log":
        return LoggingNotifier()
    return ConsoleNotifier()


def product_repository(out: Notifier) -> InMemoryProductRepository:
    """A catalog pre-loaded with the sample products (ids 1-8)."""
    factory = ProductFactory(out)
    return InMemoryProductRepository(build_sample_catalog(factory))
