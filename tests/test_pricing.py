"""
Ikram - Fiyat Hesaplama Testleri

Test edilen fonksiyonlar:
    services.pricing.calculate_totals   - Teklif toplamlari
    services.pricing.payment_status_for - Odeme durumu
    services.pricing.format_currency    - Tutar yazimi
    POST /api/v1/quotations/preview     - Kaydetmeden hesaplama
"""

from decimal import Decimal
from types import SimpleNamespace

from ikram.services.pricing import calculate_totals, format_currency, line_total, payment_status_for


def _line(unit_price, quantity):
    return SimpleNamespace(unit_price=Decimal(unit_price), quantity=quantity)


SAMPLE_ITEMS = [_line("10000", 1), _line("500", 100)]


class TestCalculateTotals:
    """Teklif toplam hesaplama testleri."""

    def test_reference_scenario(self):
        """Iki kalem, %10 indirim, %18 vergi, 2000 servis, 20000 on odeme."""
        totals = calculate_totals(
            SAMPLE_ITEMS,
            discount_percentage=10,
            tax_percentage=18,
            service_charges=2000,
            external_charges=0,
            advance_paid=20000,
        )
        assert totals.subtotal == Decimal("60000.00")
        assert totals.discount_amount == Decimal("6000.00")
        assert totals.taxable_base == Decimal("56000.00")
        assert totals.tax_amount == Decimal("10080.00")
        assert totals.total_charges == Decimal("62000.00")
        assert totals.grand_total == Decimal("66080.00")
        assert totals.balance_due == Decimal("46080.00")
        assert totals.payment_status == "partial"

    def test_empty_items(self):
        """Kalem yoksa sadece ek ucretler toplanir."""
        totals = calculate_totals([], service_charges=1000, tax_percentage=10)
        assert totals.subtotal == Decimal("0.00")
        assert totals.grand_total == Decimal("1100.00")
        assert totals.payment_status == "pending"

    def test_discount_not_applied_to_charges(self):
        """Indirim sadece kalem toplamina uygulanir, ek ucretlere degil."""
        totals = calculate_totals(
            [_line("1000", 1)], discount_percentage=50, external_charges=1000
        )
        assert totals.discount_amount == Decimal("500.00")
        assert totals.grand_total == Decimal("1500.00")

    def test_item_order_does_not_matter(self):
        """Kalem sirasi degisince toplamlar degismemeli."""
        forward = calculate_totals(SAMPLE_ITEMS, discount_percentage=5, tax_percentage=18)
        backward = calculate_totals(
            list(reversed(SAMPLE_ITEMS)), discount_percentage=5, tax_percentage=18
        )
        assert forward == backward

    def test_subtotal_is_sum_of_lines(self):
        """Ara toplam, kalem toplamlarinin toplamina esit olmali."""
        items = [_line("249.99", 3), _line("0.35", 7), _line("12500", 1), _line("87.5", 120)]
        totals = calculate_totals(items, discount_percentage=7, tax_percentage=5)
        assert totals.subtotal == sum(line_total(i.unit_price, i.quantity) for i in items)
        assert totals.subtotal == Decimal("23752.42")

    def test_subtotal_grows_with_any_quantity(self):
        """Herhangi bir kalemin miktari artinca ara toplam azalmamali."""
        base = [("180", 40), ("0.99", 3), ("7500", 1)]
        for index in range(len(base)):
            previous = None
            for quantity in (0, 1, 2, 5, 40, 500):
                items = [
                    _line(price, quantity if position == index else qty)
                    for position, (price, qty) in enumerate(base)
                ]
                subtotal = calculate_totals(items, discount_percentage=10, tax_percentage=18).subtotal
                if previous is not None:
                    assert subtotal >= previous
                previous = subtotal

    def test_higher_discount_never_raises_total(self):
        """Indirim arttikca genel toplam artmamali."""
        previous = None
        for discount in (0, 10, 25, 50, 100):
            total = calculate_totals(SAMPLE_ITEMS, discount_percentage=discount, tax_percentage=18).grand_total
            if previous is not None:
                assert total <= previous
            previous = total

    def test_higher_tax_never_lowers_total(self):
        """Vergi orani arttikca genel toplam azalmamali."""
        totals = [
            calculate_totals(SAMPLE_ITEMS, discount_percentage=10, tax_percentage=tax).grand_total
            for tax in (0, 5, 12, 18, 28)
        ]
        assert totals == sorted(totals)

    def test_rounding_half_up(self):
        """Kurus yuvarlamasi yukari (0.005 -> 0.01)."""
        totals = calculate_totals([_line("0.05", 1)], tax_percentage=10)
        assert totals.tax_amount == Decimal("0.01")
        assert totals.grand_total == Decimal("0.06")

    def test_overpayment_gives_negative_balance(self):
        """Fazla odemede kalan bakiye negatif olur."""
        totals = calculate_totals([_line("1000", 1)], advance_paid=1500)
        assert totals.balance_due == Decimal("-500.00")
        assert totals.payment_status == "paid"


class TestPaymentStatus:
    """Odeme durumu testleri."""

    def test_pending_without_advance(self):
        assert payment_status_for(0, Decimal("5000")) == "pending"

    def test_partial_with_some_advance(self):
        assert payment_status_for(Decimal("100"), Decimal("5000")) == "partial"

    def test_paid_when_equal(self):
        """On odeme genel toplama esitse 'paid', bakiye sifir."""
        totals = calculate_totals([_line("5000", 1)], advance_paid=5000)
        assert totals.payment_status == "paid"
        assert totals.balance_due == Decimal("0.00")

    def test_zero_total_is_paid(self):
        """Tutar sifir ise odenmis sayilir."""
        assert payment_status_for(0, 0) == "paid"


class TestFormatCurrency:
    """Tutar yazim testleri."""

    def test_thousands(self):
        assert format_currency(Decimal("66080")) == "66,080"

    def test_lakh_grouping(self):
        assert format_currency(Decimal("1234567")) == "12,34,567"

    def test_keeps_non_zero_paise(self):
        assert format_currency(Decimal("1500.5")) == "1,500.50"

    def test_small_amount(self):
        assert format_currency(Decimal("999")) == "999"

    def test_negative(self):
        assert format_currency(Decimal("-46080")) == "-46,080"


class TestPreviewEndpoint:
    """POST /api/v1/quotations/preview testleri."""

    def test_preview(self, client, auth_headers, quotation_payload):
        """Onizleme kayit olusturmadan ayni toplamlari dondurmeli."""
        response = client.post(
            "/api/v1/quotations/preview", json=quotation_payload, headers=auth_headers
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert Decimal(data["grand_total"]) == Decimal("66080")
        assert Decimal(data["balance_due"]) == Decimal("46080")
        assert data["payment_status"] == "partial"

        listing = client.get("/api/v1/quotations", headers=auth_headers)
        assert listing.json()["total"] == 0

    def test_preview_uses_default_tax(self, client, auth_headers):
        """Vergi orani verilmezse isletme varsayilani (%18) kullanilir."""
        response = client.post(
            "/api/v1/quotations/preview",
            json={"items": [{"item_name": "Thali", "unit_price": "100", "quantity": 10}]},
            headers=auth_headers,
        )
        assert response.status_code == 200, response.text
        assert Decimal(response.json()["tax_amount"]) == Decimal("180")

    def test_preview_rejects_discount_over_100(self, client, auth_headers):
        response = client.post(
            "/api/v1/quotations/preview",
            json={"items": [], "discount_percentage": "150"},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_preview_rejects_negative_price(self, client, auth_headers):
        response = client.post(
            "/api/v1/quotations/preview",
            json={"items": [{"item_name": "Thali", "unit_price": "-1", "quantity": 1}]},
            headers=auth_headers,
        )
        assert response.status_code == 422
