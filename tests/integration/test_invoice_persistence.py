"""Integration tests for saving, reloading, replacing and deleting invoices"""

import pytest
from datetime import datetime
from decimal import Decimal

from src.adapter.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyInvoiceLineRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceSequenceRepository,
    SqlAlchemyItemRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.invoice_number_allocator import InvoiceNumberAllocator
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.delete_invoice import DeleteInvoice
from src.app.use_cases.invoicing.dtos import (
    CreateInvoiceCommandDTO,
    InvoiceLineInputDTO,
    UpdateInvoiceCommandDTO,
)
from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.app.use_cases.invoicing.update_invoice import UpdateInvoice
from src.domain.pricing import DiscountType

TAX_RATE = Decimal("0.18")


def build_create(session) -> CreateInvoice:
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    return CreateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=invoice_repo,
        invoice_line_repo=SqlAlchemyInvoiceLineRepository(session),
        customer_repo=SqlAlchemyCustomerRepository(session),
        item_repo=SqlAlchemyItemRepository(session),
        allocator=InvoiceNumberAllocator(
            SqlAlchemyInvoiceSequenceRepository(session),
            invoice_repo,
            clock=lambda: datetime(2024, 11, 5),
        ),
        tax_rate=TAX_RATE,
    )


def build_get(session) -> GetInvoice:
    return GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )


def order_command(seeded_catalog, **overrides) -> CreateInvoiceCommandDTO:
    notebook, pen, _ = seeded_catalog["items"]
    fields = dict(
        customer_id=seeded_catalog["customers"][0].id,
        lines=[
            InvoiceLineInputDTO(item_id=notebook.id, quantity=2, price=Decimal("500")),
            InvoiceLineInputDTO(item_id=pen.id, quantity=1, price=Decimal("45")),
        ],
        discount_type=DiscountType.PERCENT,
        discount_value=Decimal("10"),
    )
    fields.update(overrides)
    return CreateInvoiceCommandDTO(**fields)


@pytest.mark.asyncio
class TestInvoicePersistence:

    async def test_saved_invoice_reloads_identically(self, db_session, seeded_catalog):
        created = await build_create(db_session).execute(
            order_command(seeded_catalog, net_override=Decimal("1110"))
        )
        assert created.is_ok(), created.error

        loaded = await build_get(db_session).execute(created.value.invoice_id)

        assert loaded.is_ok()
        invoice = loaded.value
        assert invoice.invoice_number == "INV-2425-0001"
        assert [(l.item_id, l.quantity, l.price) for l in invoice.lines] == [
            (l.item_id, l.quantity, l.price) for l in created.value.lines
        ]
        assert invoice.subtotal == Decimal("1045")
        assert invoice.discount_amount == Decimal("104.5")
        assert invoice.taxable_amount == Decimal("940.5")
        assert invoice.tax_amount == Decimal("169.29")
        assert invoice.total == Decimal("1110")
        assert invoice.rounding_adjustment == Decimal("0.21")
        assert invoice.total - (invoice.taxable_amount + invoice.tax_amount) == invoice.rounding_adjustment

    async def test_zero_priced_rows_are_not_stored(self, db_session, seeded_catalog):
        notebook, _, sugar = seeded_catalog["items"]
        command = order_command(
            seeded_catalog,
            lines=[
                InvoiceLineInputDTO(item_id=notebook.id, quantity=1, price=Decimal("500")),
                InvoiceLineInputDTO(item_id=sugar.id, quantity=3, price=Decimal("0")),
            ],
            discount_value=Decimal("0"),
        )

        created = await build_create(db_session).execute(command)

        assert [line.item_id for line in created.value.lines] == [notebook.id]
        assert created.value.total == Decimal("590")

    async def test_sequential_numbers(self, db_session, seeded_catalog):
        first = await build_create(db_session).execute(order_command(seeded_catalog))
        second = await build_create(db_session).execute(order_command(seeded_catalog))

        assert first.value.invoice_number == "INV-2425-0001"
        assert second.value.invoice_number == "INV-2425-0002"

    async def test_missing_customer_stores_nothing(self, db_session, seeded_catalog):
        result = await build_create(db_session).execute(order_command(seeded_catalog, customer_id=None))

        assert result.error.code == "VALIDATION_ERROR"
        assert await SqlAlchemyInvoiceRepository(db_session).count() == 0

    async def test_update_keeps_number_and_creation_date(self, db_session, seeded_catalog):
        created = await build_create(db_session).execute(order_command(seeded_catalog))
        _, pen, _ = seeded_catalog["items"]
        second_customer = seeded_catalog["customers"][1]

        update = UpdateInvoice(
            uow=SqlAlchemyUnitOfWork(db_session),
            invoice_repo=SqlAlchemyInvoiceRepository(db_session),
            invoice_line_repo=SqlAlchemyInvoiceLineRepository(db_session),
            customer_repo=SqlAlchemyCustomerRepository(db_session),
            item_repo=SqlAlchemyItemRepository(db_session),
            tax_rate=TAX_RATE,
        )
        updated = await update.execute(
            UpdateInvoiceCommandDTO(
                invoice_id=created.value.invoice_id,
                customer_id=second_customer.id,
                lines=[InvoiceLineInputDTO(item_id=pen.id, quantity=4, price=Decimal("45"))],
                discount_type=DiscountType.FLAT,
                discount_value=Decimal("20"),
            )
        )

        assert updated.is_ok(), updated.error
        assert updated.value.invoice_number == created.value.invoice_number
        assert updated.value.created_at == created.value.created_at
        assert updated.value.customer_id == second_customer.id
        assert [(l.item_id, l.quantity) for l in updated.value.lines] == [(pen.id, 4)]
        assert updated.value.subtotal == Decimal("180")
        assert updated.value.total == Decimal("188.8")

        stored_lines = await SqlAlchemyInvoiceLineRepository(db_session).get_by_invoice_id(
            created.value.invoice_id
        )
        assert len(stored_lines) == 1

    async def test_delete_removes_only_that_invoice(self, db_session, seeded_catalog):
        kept = await build_create(db_session).execute(order_command(seeded_catalog))
        doomed = await build_create(db_session).execute(order_command(seeded_catalog))

        delete = DeleteInvoice(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyInvoiceRepository(db_session),
            SqlAlchemyInvoiceLineRepository(db_session),
        )
        result = await delete.execute(doomed.value.invoice_id)

        assert result.is_ok()
        gone = await build_get(db_session).execute(doomed.value.invoice_id)
        assert gone.error.code == "INVOICE_NOT_FOUND"
        assert await SqlAlchemyInvoiceLineRepository(db_session).get_by_invoice_id(
            doomed.value.invoice_id
        ) == []

        still_there = await build_get(db_session).execute(kept.value.invoice_id)
        assert still_there.is_ok()
        assert len(still_there.value.lines) == 2

    async def test_delete_does_not_recycle_numbers(self, db_session, seeded_catalog):
        first = await build_create(db_session).execute(order_command(seeded_catalog))
        await DeleteInvoice(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyInvoiceRepository(db_session),
            SqlAlchemyInvoiceLineRepository(db_session),
        ).execute(first.value.invoice_id)

        second = await build_create(db_session).execute(order_command(seeded_catalog))

        assert second.value.invoice_number == "INV-2425-0002"
