from .rate_card import RateCard as RateCard
from .rate_card import RateUnit as RateUnit
from .rental_duration import RentalDuration as RentalDuration
from .rental_interval import RentalInterval as RentalInterval
