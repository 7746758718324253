from .duration_decomposer import DurationDecomposer as DurationDecomposer
from .late_fee_calculator import LateFeeCalculator as LateFeeCalculator
from .rate_calculator import PriceBreakdown as PriceBreakdown
from .rate_calculator import PriceLine as PriceLine
from .rate_calculator import RateCalculator as RateCalculator
