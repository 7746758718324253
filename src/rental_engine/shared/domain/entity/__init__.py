from .aggregate import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .events import StatusChanged as StatusChanged
