"""Invoice API Routes

FastAPI routes for creating, browsing, replacing, deleting and printing
invoices.
"""

import base64
import logging
from typing import Literal, Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Result
from src.api.error import ClientError
from src.api.schemas.invoice_request import InvoiceRequestSchema
from src.app.use_cases.invoicing.dtos import (
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceLineInputDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
    NextInvoiceNumberResponseDTO,
    DeleteInvoiceResponseDTO,
)
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.update_invoice import UpdateInvoice
from src.app.use_cases.invoicing.delete_invoice import DeleteInvoice
from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.app.use_cases.invoicing.list_invoices import ListInvoices
from src.app.use_cases.invoicing.preview_invoice_number import PreviewInvoiceNumber
from src.app.use_cases.invoicing.render_invoice_pdf import RenderInvoicePdf
from src.adapter.repositories import (
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceLineRepository,
    SqlAlchemyCustomerRepository,
    SqlAlchemyItemRepository,
)
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, build_allocator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_CODES = {"INVOICE_NOT_FOUND", "ITEM_NOT_FOUND"}

ERROR_RESPONSES = {
    400: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "Please select a customer"
                    }
                }
            }
        }
    },
    404: {
        "description": "Invoice or item not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice with ID 123 not found"
                    }
                }
            }
        }
    },
}


def raise_for_error(result: Result) -> None:
    if not result.is_err():
        return
    if result.error.code in NOT_FOUND_CODES:
        raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
    if result.error.code == "INVOICE_NUMBER_CONFLICT":
        raise ClientError(result.error, status_code=status.HTTP_409_CONFLICT)
    if result.error.code.endswith("_FAILED"):
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise ClientError(result.error)


def to_command_fields(request: InvoiceRequestSchema) -> dict:
    return dict(
        customer_id=request.customer_id,
        lines=[
            InvoiceLineInputDTO(item_id=line.item_id, quantity=line.quantity, price=line.price)
            for line in request.lines
        ],
        discount_type=request.discount_type,
        discount_value=request.discount_value,
        net_override=request.net_override,
    )


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        **ERROR_RESPONSES,
        409: {
            "description": "Invoice number taken by a concurrent save",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NUMBER_CONFLICT",
                            "message": "Invoice number INV-2425-0007 is already taken"
                        }
                    }
                }
            }
        },
    }
)
async def create_invoice(
    request: InvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Save a new invoice.

    Pricing is recomputed on the server with the configured tax rate; the
    invoice number is allocated at save time. Rows with price 0 are dropped.

    **Returns:**
    - 201: Invoice created
    - 400: No customer, no billable line, or invalid values
    - 404: A line references an unknown item
    - 409: Invoice number collision (after one automatic retry)
    """
    command = CreateInvoiceCommandDTO(**to_command_fields(request))

    def build_use_case() -> CreateInvoice:
        return CreateInvoice(
            uow=SqlAlchemyUnitOfWork(session),
            invoice_repo=SqlAlchemyInvoiceRepository(session),
            invoice_line_repo=SqlAlchemyInvoiceLineRepository(session),
            customer_repo=SqlAlchemyCustomerRepository(session),
            item_repo=SqlAlchemyItemRepository(session),
            allocator=build_allocator(session),
            tax_rate=ApplicationConfig.TAX_RATE,
        )

    result = await build_use_case().execute(command)

    if result.is_err() and result.error.code == "INVOICE_NUMBER_CONFLICT":
        logger.warning("Retrying invoice creation after number conflict")
        result = await build_use_case().execute(command)

    raise_for_error(result)
    return result.value


@router.get(
    "",
    response_model=ListInvoicesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    search: Optional[str] = Query(None, description="Substring of invoice number or customer name"),
    customer_id: Optional[int] = Query(None, description="Only invoices of this customer"),
    sort_by: Literal["date", "total", "number"] = Query("date", description="Sort field"),
    order: Literal["asc", "desc"] = Query("desc", description="Sort direction"),
    limit: int = Query(20, ge=1, le=100, description="Page size"),
    offset: int = Query(0, ge=0, description="Page offset"),
    session: AsyncSession = Depends(get_session)
):
    """
    Browse saved invoices, newest first by default.
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(
        search=search,
        customer_id=customer_id,
        sort_by=sort_by,
        descending=order == "desc",
        limit=limit,
        offset=offset,
    )

    raise_for_error(result)
    return result.value


@router.get(
    "/next-number",
    response_model=NextInvoiceNumberResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def next_invoice_number(session: AsyncSession = Depends(get_session)):
    """
    Number the next saved invoice will probably get.

    Display only; the stored number is allocated when the invoice is saved.
    """
    use_case = PreviewInvoiceNumber(build_allocator(session))
    result = await use_case.execute()

    raise_for_error(result)
    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Read one invoice with its stored lines and pricing snapshot.
    """
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )
    result = await use_case.execute(invoice_id)

    raise_for_error(result)
    return result.value


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def update_invoice(
    invoice_id: int,
    request: InvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Replace an invoice's customer, lines and pricing.

    The invoice number and creation date are kept.
    """
    command = UpdateInvoiceCommandDTO(invoice_id=invoice_id, **to_command_fields(request))

    use_case = UpdateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        invoice_line_repo=SqlAlchemyInvoiceLineRepository(session),
        customer_repo=SqlAlchemyCustomerRepository(session),
        item_repo=SqlAlchemyItemRepository(session),
        tax_rate=ApplicationConfig.TAX_RATE,
    )
    result = await use_case.execute(command)

    raise_for_error(result)
    return result.value


@router.delete(
    "/{invoice_id}",
    response_model=DeleteInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def delete_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Permanently delete an invoice and its lines.
    """
    use_case = DeleteInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )
    result = await use_case.execute(invoice_id)

    raise_for_error(result)
    return result.value


@router.get(
    "/{invoice_id}/pdf",
    response_class=Response,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Printable invoice",
            "content": {"application/pdf": {}}
        },
        **ERROR_RESPONSES,
    }
)
async def download_invoice_pdf(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Download the printable invoice as a PDF file.
    """
    use_case = RenderInvoicePdf(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        invoice_line_repo=SqlAlchemyInvoiceLineRepository(session),
        customer_repo=SqlAlchemyCustomerRepository(session),
        item_repo=SqlAlchemyItemRepository(session),
        pdf_service=ReportLabPdfService(),
        company_name=ApplicationConfig.COMPANY_NAME,
        company_address=ApplicationConfig.COMPANY_ADDRESS,
        currency_symbol=ApplicationConfig.CURRENCY_SYMBOL,
    )
    result = await use_case.execute(invoice_id)

    raise_for_error(result)

    pdf_bytes = base64.b64decode(result.value.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={result.value.invoice_number}.pdf"
        }
    )
