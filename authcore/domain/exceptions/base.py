"""Base domain exception classes."""


class DomainException(Exception):
    """Base exception for all domain-related errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r})"


class InvalidStateTransitionError(DomainException):
    """Raised when an entity is asked for a transition its state does not allow."""

    def __init__(self, entity: str, current_state: str, attempted_transition: str):
        self.entity = entity
        self.current_state = current_state
        self.attempted_transition = attempted_transition
        super().__init__(
            message=f"Cannot {attempted_transition} {entity} in state: {current_state}",
            code=f"INVALID_{entity.upper()}_STATE_TRANSITION",
        )
