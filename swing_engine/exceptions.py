"""
Domain exceptions for the swing engine
"""


class DomainException(Exception):
    """Base exception for domain errors"""
    pass


class ValidationError(DomainException):
    """Validation error"""
    pass


class ConfigurationError(DomainException):
    """Configuration error"""
    pass


class InvalidParameterError(ValidationError):
    """Invalid indicator parameter (raised before any bar is read)"""

    def __init__(self, name: str, value, message: str):
        super().__init__(message)
        self.name = name
        self.value = value
