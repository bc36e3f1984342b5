"""
PDF ciktilari (teklif ve paket).
HTML sablonu Jinja2 ile render edilir, xhtml2pdf ile PDF'e cevrilir.
Tutarlar services.pricing ile yeniden hesaplanir; PDF ekrandaki teklifle
ayni sonucu gosterir.
"""
import io
import os
import uuid
import logging

from fastapi import HTTPException, status
from jinja2 import Environment, FileSystemLoader, select_autoescape
from sqlalchemy.orm import Session
from xhtml2pdf import pisa

from ikram.config import settings
from ikram.services import company as company_service
from ikram.services import package as package_service
from ikram.services.pricing import format_currency, totals_for_quotation
from ikram.services.quotation import get_quotation, valid_until

logger = logging.getLogger(__name__)

_template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
env = Environment(
    loader=FileSystemLoader(_template_dir),
    autoescape=select_autoescape(["html"]),
)
env.filters["money"] = lambda value: f"{settings.CURRENCY_LABEL} {format_currency(value)}"


def html_to_pdf(html_content: str, name: str) -> bytes:
    """HTML'den PDF uret. Donusum hatasinda 500."""
    pdf_buffer = io.BytesIO()
    pisa_status = pisa.CreatePDF(html_content, dest=pdf_buffer)
    if pisa_status.err:
        logger.error("PDF olusturma hatasi (%s): %s", name, pisa_status.err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="PDF olusturulamadi",
        )
    return pdf_buffer.getvalue()


def render_quotation_html(db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID) -> tuple[str, str]:
    """Dondurur: (dosya_adi, html)"""
    quotation = get_quotation(db, quotation_id, owner_id)
    html_content = env.get_template("quotations/pdf.html").render(
        quotation=quotation,
        totals=totals_for_quotation(quotation),
        company=company_service.get_company_settings(db, owner_id),
        valid_until=valid_until(quotation),
    )
    return f"{quotation.quotation_number}.pdf", html_content


def quotation_pdf(db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID) -> tuple[str, bytes]:
    filename, html_content = render_quotation_html(db, quotation_id, owner_id)
    return filename, html_to_pdf(html_content, filename)


def render_package_html(db: Session, package_id: uuid.UUID, owner_id: uuid.UUID) -> tuple[str, str]:
    package = package_service.get_package(db, package_id, owner_id)
    html_content = env.get_template("packages/pdf.html").render(
        package=package,
        company=company_service.get_company_settings(db, owner_id),
    )
    safe_name = "".join(c if c.isalnum() else "-" for c in package.name).strip("-") or "paket"
    return f"{safe_name}.pdf", html_content


def package_pdf(db: Session, package_id: uuid.UUID, owner_id: uuid.UUID) -> tuple[str, bytes]:
    filename, html_content = render_package_html(db, package_id, owner_id)
    return filename, html_to_pdf(html_content, filename)
