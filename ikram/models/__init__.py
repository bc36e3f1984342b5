# Tum modelleri buradan import ediyoruz
# Boylece Alembic autogenerate tum tablolari gorebilir
from ikram.models.user import User
from ikram.models.client import Client
from ikram.models.menu import MenuCategory, MenuItem, MenuTemplate, MenuTemplateItem
from ikram.models.package import Package, PackageItem
from ikram.models.quotation import Quotation, QuotationItem, QuotationResponse, QuotationVersion
from ikram.models.event import CalendarEvent, EventExpense, EventExpenseItem
from ikram.models.payment import Payment
from ikram.models.expense import Expense
from ikram.models.company import CompanySettings
from ikram.models.activity import Activity

__all__ = [
    "User", "Client", "MenuCategory", "MenuItem", "MenuTemplate", "MenuTemplateItem",
    "Package", "PackageItem", "Quotation", "QuotationItem", "QuotationResponse",
    "QuotationVersion", "CalendarEvent", "EventExpense", "EventExpenseItem",
    "Payment", "Expense", "CompanySettings", "Activity",
]
