class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


class InvalidIntervalError(BusinessRuleViolationException, ValueError):
    """レンタル期間が不正な場合（終了日時 <= 開始日時、解析不能な日時）"""

    pass


class MissingRateError(BusinessRuleViolationException):
    """指定期間に適用できる料金区分がない場合"""

    pass


class IllegalTransitionError(BusinessRuleViolationException):
    """許可されていないステータス遷移"""

    def __init__(self, entity: str, current: str, target: str) -> None:
        super().__init__(f"Cannot transition {entity} from {current} to {target}")
        self.entity = entity
        self.current = current
        self.target = target


class NegativeAmountError(BusinessRuleViolationException, ValueError):
    """金額が負（または正であるべき金額が 0 以下）の場合"""

    pass
