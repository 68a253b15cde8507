"""Notifier that forwards everything to the standard logging module."""

from __future__ import annotations

import logging

from tinymart.domain.model.cart import CartReport
from tinymart.domain.notifier import Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def info(self, message: str) -> None:
        self._log.info(message)

    def warn(self, message: str) -> None:
        self._log.warning(message)

    def report(self, report: CartReport) -> None:
        self._log.info("Cart owner: %s", report.owner_name)
        for item in report.items:
            self._log.info(
                "[%s] #%s %s %s (review %s)",
                item.kind, item.product_id, item.name, item.price, item.review_rate,
            )
            for label, value in item.details:
                self._log.info("    %s: %s", label, value)
        self._log.info("Total number of purchases: %s", report.total_count)
        self._log.info("Total purchasing amount: %s", report.total_amount)
        self._log.info("Average cost: %s", report.average_cost)
