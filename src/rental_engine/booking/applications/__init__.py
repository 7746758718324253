from .change_booking_status import (
    ChangeBookingStatusService as ChangeBookingStatusService,
)
from .create_booking import CreateBookingService as CreateBookingService
