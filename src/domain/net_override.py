"""Net Amount Override

Operator-entered final total. States:

    UNSET -> EDITING -> COMMITTED -> EDITING -> ...

While EDITING the typed characters are kept verbatim but the effective
override is None, so the invoice total keeps tracking the computed total
until the value is committed.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional
from src.domain.errors import InvoiceValidationError
from src.domain.money import round_currency, round_whole, to_decimal


class OverrideState(str, Enum):
    UNSET = "unset"
    EDITING = "editing"
    COMMITTED = "committed"


class NetAmountOverride:
    """Sticky operator override of the invoice total"""

    def __init__(self):
        self.state = OverrideState.UNSET
        self.text = ""
        self._committed: Optional[Decimal] = None

    @classmethod
    def committed_to(cls, value: Decimal) -> "NetAmountOverride":
        override = cls()
        override.text = f"{round_currency(value)}"
        override._committed = to_decimal(value)
        override.state = OverrideState.COMMITTED
        return override

    def begin_edit(self, computed_total: Decimal) -> None:
        if self.state == OverrideState.UNSET or self.text == "":
            self.text = f"{round_whole(computed_total)}"
        self.state = OverrideState.EDITING

    def type_text(self, text: str) -> None:
        if self.state != OverrideState.EDITING:
            raise InvoiceValidationError("Net amount is not being edited")
        self.text = text

    def commit(self) -> Optional[Decimal]:
        """
        Freeze the typed text as the override

        Empty text commits to "no override". Non-numeric text raises and
        leaves the override in EDITING.
        """
        if self.state != OverrideState.EDITING:
            return self._committed
        text = self.text.strip()
        if text == "":
            value = None
        else:
            try:
                value = to_decimal(text)
            except InvalidOperation:
                raise InvoiceValidationError(f"Net amount '{self.text}' is not a number")
            if not value.is_finite():
                raise InvoiceValidationError(f"Net amount '{self.text}' is not a number")
        self._committed = value
        self.state = OverrideState.COMMITTED
        return value

    @property
    def effective(self) -> Optional[Decimal]:
        if self.state == OverrideState.EDITING:
            return None
        return self._committed

    def display_text(self, computed_total: Decimal) -> str:
        if self.text == "":
            return f"{round_currency(computed_total)}"
        return self.text
