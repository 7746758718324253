from .entity import Payment as Payment
from .enum import PaymentMethod as PaymentMethod
from .factory import PaymentDetails as PaymentDetails
from .factory import PaymentFactory as PaymentFactory
from .repository import PaymentRepository as PaymentRepository
from .service import LedgerSummary as LedgerSummary
from .service import PaymentLedger as PaymentLedger
from .service import PaymentRequest as PaymentRequest
from .value_object import PaymentId as PaymentId
