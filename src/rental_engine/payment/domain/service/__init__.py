from .payment_ledger import LedgerSummary as LedgerSummary
from .payment_ledger import PaymentLedger as PaymentLedger
from .payment_ledger import PaymentRequest as PaymentRequest
