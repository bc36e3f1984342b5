"""
Teklif fiyat hesaplama.

Tek ve saf hesaplama fonksiyonu: teklif formu, onizleme, musteri
gorunumu ve PDF ciktisi ayni sonucu uretsin diye hepsi buradan hesaplar.

Hesaplama sirasi:
    subtotal        = sum(unit_price * quantity)
    discount_amount = subtotal * discount_percentage / 100
    taxable_base    = subtotal - discount_amount + service_charges + external_charges
    tax_amount      = taxable_base * tax_percentage / 100
    grand_total     = taxable_base + tax_amount
    balance_due     = grand_total - advance_paid   (fazla odemede negatif)

Tum hesaplar Decimal ile yapilir, sonuclar 0.01'e yuvarlanir (ROUND_HALF_UP).
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Protocol

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")

PAYMENT_PENDING = "pending"
PAYMENT_PARTIAL = "partial"
PAYMENT_PAID = "paid"


class PricedLine(Protocol):
    """unit_price ve quantity alanlari olan her nesne (model veya schema)."""
    unit_price: Decimal
    quantity: int


@dataclass(frozen=True)
class QuotationTotals:
    subtotal: Decimal
    discount_amount: Decimal
    taxable_base: Decimal
    tax_amount: Decimal
    total_charges: Decimal
    grand_total: Decimal
    advance_paid: Decimal
    balance_due: Decimal
    payment_status: str

    def as_dict(self) -> dict:
        return {
            "subtotal": self.subtotal,
            "discount_amount": self.discount_amount,
            "taxable_base": self.taxable_base,
            "tax_amount": self.tax_amount,
            "total_charges": self.total_charges,
            "grand_total": self.grand_total,
            "advance_paid": self.advance_paid,
            "balance_due": self.balance_due,
            "payment_status": self.payment_status,
        }


def _to_decimal(value) -> Decimal:
    """float/int/str/None -> Decimal. float'lar str uzerinden cevrilir."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _round(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(unit_price, quantity) -> Decimal:
    """Tek kalemin toplami: unit_price * quantity."""
    return _round(_to_decimal(unit_price) * _to_decimal(quantity))


def payment_status_for(advance_paid, grand_total) -> str:
    """
    Odeme durumu:
        advance_paid >= grand_total -> paid
        advance_paid > 0            -> partial
        aksi halde                  -> pending
    """
    advance = _to_decimal(advance_paid)
    total = _to_decimal(grand_total)
    if advance >= total:
        return PAYMENT_PAID
    if advance > ZERO:
        return PAYMENT_PARTIAL
    return PAYMENT_PENDING


def calculate_totals(
    items: Iterable[PricedLine],
    discount_percentage=0,
    tax_percentage=0,
    service_charges=0,
    external_charges=0,
    advance_paid=0,
) -> QuotationTotals:
    """
    Kalemler ve fiyat girdilerinden teklif toplamlarini hesapla.
    Yan etkisi yoktur; ayni girdiler her zaman ayni sonucu verir.
    """
    subtotal = sum(
        (line_total(item.unit_price, item.quantity) for item in items), ZERO
    )
    service = _to_decimal(service_charges)
    external = _to_decimal(external_charges)
    advance = _to_decimal(advance_paid)

    discount_amount = _round(subtotal * _to_decimal(discount_percentage) / HUNDRED)
    taxable_base = subtotal - discount_amount + service + external
    tax_amount = _round(taxable_base * _to_decimal(tax_percentage) / HUNDRED)
    grand_total = _round(taxable_base + tax_amount)

    return QuotationTotals(
        subtotal=_round(subtotal),
        discount_amount=discount_amount,
        taxable_base=_round(taxable_base),
        tax_amount=tax_amount,
        total_charges=_round(subtotal + service + external),
        grand_total=grand_total,
        advance_paid=_round(advance),
        balance_due=_round(grand_total - advance),
        payment_status=payment_status_for(advance, grand_total),
    )


def totals_for_quotation(quotation) -> QuotationTotals:
    """Kayitli bir teklifin toplamlarini saklanan girdilerden yeniden hesapla."""
    return calculate_totals(
        quotation.items,
        discount_percentage=quotation.discount_percentage,
        tax_percentage=quotation.tax_percentage,
        service_charges=quotation.service_charges,
        external_charges=quotation.external_charges,
        advance_paid=quotation.advance_paid,
    )


def apply_totals(quotation, totals: QuotationTotals) -> None:
    """Hesaplanan tutarlari teklif nesnesine yaz."""
    quotation.subtotal = totals.subtotal
    quotation.discount_amount = totals.discount_amount
    quotation.tax_amount = totals.tax_amount
    quotation.total_charges = totals.total_charges
    quotation.grand_total = totals.grand_total
    quotation.balance_due = totals.balance_due
    quotation.payment_status = totals.payment_status


def format_currency(value) -> str:
    """
    Tutari Hint usulu gruplama ile yaz (12,34,567.50).
    Kurus kismi .00 ise atilir: 66080 -> "66,080".
    """
    amount = _round(_to_decimal(value))
    sign = "-" if amount < 0 else ""
    integer_part, decimal_part = f"{abs(amount):.2f}".split(".")

    last_three = integer_part[-3:]
    rest = integer_part[:-3]
    groups = []
    while rest:
        groups.insert(0, rest[-2:])
        rest = rest[:-2]
    formatted = ",".join(groups + [last_three])

    if decimal_part == "00":
        return f"{sign}{formatted}"
    return f"{sign}{formatted}.{decimal_part}"
