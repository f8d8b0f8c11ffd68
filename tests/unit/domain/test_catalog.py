"""Unit tests for the in-memory Catalog"""

from decimal import Decimal
from src.domain.catalog import Catalog
from src.domain.item import Item
from src.domain.resolution import Resolved, Unresolved


class TestCatalog:

    def test_lookup_by_code_ignores_case(self, notebook, pen):
        catalog = Catalog([notebook, pen])

        resolution = catalog.by_code("nb-a5")

        assert isinstance(resolution, Resolved)
        assert resolution.entity is notebook
        assert resolution.ref == 3

    def test_missing_code(self, notebook):
        resolution = Catalog([notebook]).by_code("XYZ")
        assert resolution == Unresolved("XYZ")

    def test_blank_code_never_matches(self):
        item = Item(id=1, code=None, name="Loose", price=Decimal("1"))
        assert isinstance(Catalog([item]).by_code(""), Unresolved)

    def test_first_item_wins_on_duplicate_code(self):
        first = Item(id=1, code="DUP", name="First", price=Decimal("1"))
        second = Item(id=2, code="dup", name="Second", price=Decimal("2"))

        resolution = Catalog([first, second]).by_code("Dup")

        assert resolution.entity is first

    def test_lookup_by_ref(self, notebook, pen):
        catalog = Catalog([notebook, pen])
        assert catalog.by_ref(5).entity is pen
        assert isinstance(catalog.by_ref(99), Unresolved)
        assert len(catalog) == 2
