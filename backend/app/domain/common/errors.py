"""Domain error types."""


class DomainError(Exception):
    """Base domain error."""
    pass


class NotFoundError(DomainError):
    """Resource not found."""
    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with id {identifier} not found")


class ValidationError(DomainError):
    """Validation error."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidStateError(DomainError):
    """Operation not allowed in the entity's current state."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InsufficientStampsError(InvalidStateError):
    """Reward redemption attempted without enough stamps."""
    def __init__(self, stamps: int, required: int):
        self.stamps = stamps
        self.required = required
        super().__init__(f"Not enough stamps: {stamps} of {required} required")


class PolicyViolationError(DomainError):
    """Business rule rejected the operation."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SelfPurchaseError(PolicyViolationError):
    """Seller tried to buy their own listing."""
    def __init__(self, product_id: str, buyer_id: str):
        self.product_id = product_id
        self.buyer_id = buyer_id
        super().__init__(f"User {buyer_id} cannot purchase their own product {product_id}")


class ConflictError(DomainError):
    """Resource conflict error (stale or duplicate write)."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
