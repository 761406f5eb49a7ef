"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidArgumentError(DomainException, ValueError):
    """Checkout input violates a validation rule (rental days, discount, tool code)"""

    pass


class DateParseError(DomainException, ValueError):
    """Checkout date string is malformed or names a non-existent day"""

    pass
