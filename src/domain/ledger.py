"""Line Item Ledger

Ordered set of invoice rows being edited. The last row is always available
for new input: whenever it becomes filled a blank row is appended.
"""

from decimal import Decimal
from typing import Iterable, List, Optional, Tuple
from src.domain.catalog import Catalog
from src.domain.item import Item
from src.domain.line_item import LineItem
from src.domain.pricing import subtotal_of
from src.domain.resolution import Resolution, Resolved


class LineItemLedger:
    """
    Editable list of LineItems

    Each operation touches one row and appends at most one row; totals are
    derived on demand by the pricing engine, never maintained here.
    """

    def __init__(self, lines: Optional[Iterable[LineItem]] = None):
        self._lines: List[LineItem] = list(lines or [])
        if not self._lines:
            self._lines.append(LineItem())

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> LineItem:
        return self._lines[index]

    @property
    def lines(self) -> Tuple[LineItem, ...]:
        return tuple(self._lines)

    @property
    def subtotal(self) -> Decimal:
        return subtotal_of(self._lines)

    def filled_lines(self) -> List[LineItem]:
        return [line for line in self._lines if line.is_billable]

    def set_line(self, index: int, **patch) -> LineItem:
        """
        Replace fields on one row

        Clearing item_ref also resets unit_price to 0 so no stale price
        survives. Validation errors (e.g. quantity <= 0) leave the row as is.
        """
        current = self._lines[index]
        data = current.model_dump()
        data.update(patch)
        if "item_ref" in patch and patch["item_ref"] is None:
            data["unit_price"] = Decimal("0")
        updated = LineItem(**data)
        self._store(index, updated)
        return updated

    def resolve_by_code(self, index: int, code: str, catalog: Catalog) -> Resolution:
        """
        Resolve a row from typed code text (exact, case-insensitive)

        Unknown codes leave the row unresolved with the typed text kept,
        pending manual selection.
        """
        resolution = catalog.by_code(code)
        if isinstance(resolution, Resolved):
            self._fill(index, resolution.entity)
        else:
            current = self._lines[index]
            self._lines[index] = current.model_copy(
                update={"item_ref": None, "unit_price": Decimal("0"), "code": code}
            )
        return resolution

    def resolve_by_ref(self, index: int, item_ref: int, catalog: Catalog) -> Resolution:
        """Resolve a row from a picked catalog id; unknown ids are a no-op"""
        resolution = catalog.by_ref(item_ref)
        if isinstance(resolution, Resolved):
            self._fill(index, resolution.entity)
        return resolution

    def append_blank_if_last_filled(self) -> bool:
        if self._lines[-1].is_blank:
            return False
        self._lines.append(LineItem())
        return True

    def add_row(self) -> None:
        self._lines.append(LineItem())

    def remove_line(self, index: int) -> bool:
        """Remove a row; the sole remaining row is never removed"""
        if len(self._lines) <= 1:
            return False
        del self._lines[index]
        return True

    def _fill(self, index: int, item: Item) -> None:
        current = self._lines[index]
        filled = current.model_copy(
            update={"item_ref": item.id, "unit_price": item.price, "code": item.code or ""}
        )
        self._store(index, filled)

    def _store(self, index: int, line: LineItem) -> None:
        self._lines[index] = line
        if index in (-1, len(self._lines) - 1):
            self.append_blank_if_last_filled()
