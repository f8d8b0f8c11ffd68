"""Domain errors"""


class InvoiceValidationError(ValueError):
    """Invoice cannot be saved as entered (no customer, no billable lines, bad input)"""


class InvoiceNumberConflict(Exception):
    """Invoice number already taken; raised when the unique constraint fires"""

    def __init__(self, invoice_number: str):
        super().__init__(f"Invoice number {invoice_number} already exists")
        self.invoice_number = invoice_number
