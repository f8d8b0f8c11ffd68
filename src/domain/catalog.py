"""In-memory catalog index used while editing a ledger."""

from typing import Dict, Iterable, List, Optional
from src.domain.item import Item
from src.domain.resolution import Resolution, resolve


def normalize_code(code: Optional[str]) -> str:
    return (code or "").strip().lower()


class Catalog:
    """
    Lookup table over catalog items

    Built once from the item list (the editing session loads it up front),
    so resolving a row never goes back to storage.
    """

    def __init__(self, items: Iterable[Item]):
        self._by_id: Dict[int, Item] = {}
        self._by_code: Dict[str, Item] = {}
        for item in items:
            self._by_id[item.id] = item
            key = normalize_code(item.code)
            # first item wins on duplicate codes
            if key and key not in self._by_code:
                self._by_code[key] = item

    def __len__(self) -> int:
        return len(self._by_id)

    def items(self) -> List[Item]:
        return list(self._by_id.values())

    def by_code(self, code: str) -> Resolution:
        return resolve(code, self._by_code.get(normalize_code(code)))

    def by_ref(self, item_ref: int) -> Resolution:
        return resolve(item_ref, self._by_id.get(item_ref))
