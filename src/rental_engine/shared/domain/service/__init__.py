from .booking_state_machine import BookingStateMachine as BookingStateMachine
