from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class StatusChanged:
    """集約のステータスが変わったことを表すドメインイベント"""

    aggregate: str
    aggregate_id: int
    previous: str
    current: str
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
