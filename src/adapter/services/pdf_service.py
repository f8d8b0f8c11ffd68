"""ReportLab PDF Generation Service Implementation

Implements printable invoices using ReportLab library.
"""

from io import BytesIO
from xml.sax.saxutils import escape
from typing import Dict, List, Optional
from decimal import Decimal

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.item import Item
from src.domain.money import round_currency
from src.domain.pricing import ROUNDING_EPSILON, DiscountType

COLUMN_WIDTHS = [10 * mm, 75 * mm, 20 * mm, 30 * mm, 35 * mm]


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Layout: company header, invoice number and date, bill-to block, line
    table, then the pricing breakdown from the stored snapshot.
    """

    def generate_invoice(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Optional[Customer],
        items: Dict[int, Item],
        company_name: str = "Sales Invoicing",
        company_address: str = "",
        currency_symbol: str = "Rs.",
    ) -> bytes:
        """
        Generate an invoice PDF

        Args:
            invoice: Invoice entity with the stored pricing snapshot
            invoice_lines: Stored line items
            customer: Billed customer (None if it no longer exists)
            items: Catalog items referenced by the lines, keyed by id
            company_name: Company name to display on invoice
            company_address: Company address to display on invoice
            currency_symbol: Symbol printed before amounts

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=invoice.invoice_number,
        )

        styles = getSampleStyleSheet()
        elements = []

        def money(amount: Decimal) -> str:
            return f"{currency_symbol} {round_currency(amount):,.2f}"

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )
        label_style = ParagraphStyle(
            "LabelStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=colors.HexColor("#2C3E50"),
            spaceAfter=12,
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#7F8C8D"),
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        # Header
        elements.append(Paragraph(escape(company_name), title_style))
        if company_address:
            elements.append(Paragraph(escape(company_address), header_style))
        elements.append(Spacer(1, 8 * mm))
        elements.append(Paragraph("TAX INVOICE", label_style))

        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Date:", invoice.created_at.strftime("%d-%m-%Y")],
        ]
        info_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm])
        info_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(info_table)
        elements.append(Spacer(1, 8 * mm))

        # Bill to
        elements.append(Paragraph("Bill To:", bold_style))
        if customer is not None:
            elements.append(Paragraph(escape(customer.name), normal_style))
            for part in (customer.address, customer.city):
                if part:
                    elements.append(Paragraph(escape(part), normal_style))
        else:
            elements.append(Paragraph(f"Customer #{invoice.customer_id}", normal_style))
        elements.append(Spacer(1, 8 * mm))

        # Lines
        line_data = [["#", "Item", "Qty", "Price", "Amount"]]
        for number, line in enumerate(sorted(invoice_lines, key=lambda l: l.position), start=1):
            item = items.get(line.item_id)
            line_data.append(
                [
                    str(number),
                    item.name if item is not None else f"Item #{line.item_id}",
                    str(line.quantity),
                    money(line.price),
                    money(line.line_total),
                ]
            )

        line_table = Table(line_data, colWidths=COLUMN_WIDTHS)
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Pricing breakdown
        elements.append(self._totals_table(invoice, money))
        elements.append(Spacer(1, 15 * mm))

        elements.append(
            Paragraph(
                "<i>Thank you for your business.</i>",
                ParagraphStyle(
                    "FooterNote",
                    parent=styles["Normal"],
                    fontSize=9,
                    textColor=colors.HexColor("#95A5A6"),
                ),
            )
        )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    def _totals_table(self, invoice: Invoice, money) -> Table:
        discount_type = DiscountType(invoice.discount_type)
        if discount_type == DiscountType.PERCENT:
            discount_label = f"Discount ({invoice.discount_value.normalize():f}%):"
        else:
            discount_label = "Discount:"
        tax_percent = (invoice.tax_rate * 100).normalize()

        rows = [
            ["Subtotal:", money(invoice.subtotal)],
            [discount_label, f"- {money(invoice.discount_amount)}"],
            ["Taxable Amount:", money(invoice.taxable_amount)],
            [f"Tax ({tax_percent:f}%):", money(invoice.tax_amount)],
        ]
        if abs(invoice.rounding_adjustment) > ROUNDING_EPSILON:
            rows.append(["Rounding:", money(invoice.rounding_adjustment)])
        rows.append(["Total:", money(invoice.total)])

        table = Table(
            [["", "", label, value] for label, value in rows],
            colWidths=[10 * mm, 75 * mm, 50 * mm, 35 * mm],
        )
        table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (2, -1), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (2, -1), (-1, -1), 11),
                    ("LINEABOVE", (2, -1), (-1, -1), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        return table
