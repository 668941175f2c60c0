"""
Domain Errors

Base class for errors that the domain reports as values rather than
raising across the application boundary.
"""


class DomainError(Exception):
    """
    Base class for all domain errors

    Each error carries a stable machine-readable code, a human-readable
    message and the HTTP status the outer layer should map it to.
    """
    code = 'domain_error'
    http_status = 400
    default_message = 'Domain rule violated'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {'error': self.message, 'code': self.code}

    def __eq__(self, other):
        if not isinstance(other, DomainError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))


class InvalidRange(DomainError):
    """Time range whose end is not after its start"""
    code = 'invalid_range'
    default_message = 'End time must be after start time'

    def __init__(self, start=None, end=None, message: str | None = None):
        self.start = start
        self.end = end
        super().__init__(message)
