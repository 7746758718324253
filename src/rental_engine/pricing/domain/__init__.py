from .service import DurationDecomposer as DurationDecomposer
from .service import LateFeeCalculator as LateFeeCalculator
from .service import PriceBreakdown as PriceBreakdown
from .service import PriceLine as PriceLine
from .service import RateCalculator as RateCalculator
from .value_object import RateCard as RateCard
from .value_object import RateUnit as RateUnit
from .value_object import RentalDuration as RentalDuration
from .value_object import RentalInterval as RentalInterval
