from .change_payment_status import (
    ChangePaymentStatusService as ChangePaymentStatusService,
)
from .get_booking_balance import GetBookingBalanceService as GetBookingBalanceService
from .record_payment import RecordPaymentService as RecordPaymentService
