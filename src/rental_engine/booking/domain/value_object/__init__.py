from .booking_id import BookingId as BookingId
