"""
Custom exceptions for lease check resolution.
"""


class LeaseCheckError(Exception):
    """Base exception for lease check errors"""
    pass


class EventParseError(LeaseCheckError):
    """Raised when a raw runsheet row cannot be normalized into an event"""
    pass


class InvalidRequestError(LeaseCheckError):
    """Raised when a caller omits events or the tract key"""
    pass


class ConfigurationError(LeaseCheckError):
    """Raised when the instrument type table is missing or malformed"""
    pass
