"""Stripe endpoints (one class per resource).

Each class extends `stripe_facade.adapters.api.base.Api`. The facade
resolves accessor names (`application_fees`) to these classes
(`ApplicationFees`).
"""

from stripe_facade.adapters.api.account import Account
from stripe_facade.adapters.api.application_fee_refunds import ApplicationFeeRefunds
from stripe_facade.adapters.api.application_fees import ApplicationFees
from stripe_facade.adapters.api.balance import Balance
from stripe_facade.adapters.api.bank_accounts import BankAccounts
from stripe_facade.adapters.api.bitcoin import Bitcoin
from stripe_facade.adapters.api.cards import Cards
from stripe_facade.adapters.api.charges import Charges
from stripe_facade.adapters.api.country_specs import CountrySpecs
from stripe_facade.adapters.api.coupons import Coupons
from stripe_facade.adapters.api.customers import Customers
from stripe_facade.adapters.api.disputes import Disputes
from stripe_facade.adapters.api.events import Events
from stripe_facade.adapters.api.external_accounts import ExternalAccounts
from stripe_facade.adapters.api.file_uploads import FileUploads
from stripe_facade.adapters.api.invoice_items import InvoiceItems
from stripe_facade.adapters.api.invoices import Invoices
from stripe_facade.adapters.api.order_returns import OrderReturns
from stripe_facade.adapters.api.orders import Orders
from stripe_facade.adapters.api.plans import Plans
from stripe_facade.adapters.api.products import Products
from stripe_facade.adapters.api.recipients import Recipients
from stripe_facade.adapters.api.refunds import Refunds
from stripe_facade.adapters.api.skus import Skus
from stripe_facade.adapters.api.sources import Sources
from stripe_facade.adapters.api.subscriptions import Subscriptions
from stripe_facade.adapters.api.tokens import Tokens
from stripe_facade.adapters.api.transfer_reversals import TransferReversals
from stripe_facade.adapters.api.transfers import Transfers
from stripe_facade.adapters.api.base import Api

__all__ = [
    "Api",
    "Account",
    "ApplicationFeeRefunds",
    "ApplicationFees",
    "Balance",
    "BankAccounts",
    "Bitcoin",
    "Cards",
    "Charges",
    "CountrySpecs",
    "Coupons",
    "Customers",
    "Disputes",
    "Events",
    "ExternalAccounts",
    "FileUploads",
    "InvoiceItems",
    "Invoices",
    "OrderReturns",
    "Orders",
    "Plans",
    "Products",
    "Recipients",
    "Refunds",
    "Skus",
    "Sources",
    "Subscriptions",
    "Tokens",
    "TransferReversals",
    "Transfers",
]
