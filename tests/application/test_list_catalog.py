"""Tests for the ListCatalog query."""

from tinymart.application.list_catalog import ListCatalogHandler
from tinymart.domain.service.product_factory import ProductFactory
from tinymart.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tinymart.infrastructure.sample_catalog import build_sample_catalog
from tests.fakes import FakeNotifier


def _handler() -> ListCatalogHandler:
    factory = ProductFactory(FakeNotifier())
    return ListCatalogHandler(InMemoryProductRepository(build_sample_catalog(factory)))


class TestListCatalog:

    def test_lists_sample_catalog_in_id_order(self):
        lines = _handler().handle()
        assert [line.id for line in lines] == list(range(1, 9))
        assert lines[0].name == "Yesterday"
        assert lines[0].price == "$16.50"
        assert lines[5].price == "$8.30"
        assert lines[7].kind == "Paper Book"

    def test_no_year_means_nothing_flagged(self):
        assert not any(line.new_release for line in _handler().handle())

    def test_new_release_boundary_inclusive(self):
        lines = {line.name: line for line in _handler().handle(new_release_year=1977)}
        assert lines["Star Wars"].new_release is True
        assert lines["Sound of Music"].new_release is False

    def test_only_movies_flagged(self):
        lines = _handler().handle(new_release_year=0)
        flagged = {line.kind for line in lines if line.new_release}
        assert flagged == {"Movie"}
