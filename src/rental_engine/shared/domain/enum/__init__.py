from .booking_status import BookingStatus as BookingStatus
from .payment_status import PaymentStatus as PaymentStatus
