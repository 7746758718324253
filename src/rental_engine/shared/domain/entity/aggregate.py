from typing import TypeVar

from .entity import Entity
from .events import StatusChanged

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - トランザクション境界 = 集約境界
    - 状態変更はドメインイベントとして記録し、ユースケース側で取り出す
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[StatusChanged] = []

    def add_domain_event(self, event: StatusChanged) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[StatusChanged]:
        """溜まったドメインイベントを返してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
