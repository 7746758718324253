from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .entity import StatusChanged as StatusChanged
from .enum import BookingStatus as BookingStatus
from .enum import PaymentStatus as PaymentStatus
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    IllegalTransitionError as IllegalTransitionError,
)
from .exception import (
    InvalidIntervalError as InvalidIntervalError,
)
from .exception import (
    MissingRateError as MissingRateError,
)
from .exception import (
    NegativeAmountError as NegativeAmountError,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .service import BookingStateMachine as BookingStateMachine
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    TenantId as TenantId,
)
