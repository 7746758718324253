from .currency import Currency
from .iso_date_time import IsoDateTime, ensure_aware
from .money import Money
from .tenant_id import TenantId

__all__ = ["TenantId", "Currency", "Money", "IsoDateTime", "ensure_aware"]
