"""
Domain Errors

Every failure raised by the domain and application layers derives from
DomainError. The API layer maps them to HTTP responses; nothing below it
knows about HTTP.
"""


class DomainError(Exception):
    """Base class for domain errors"""

    code = "domain_error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class NotFoundError(DomainError):
    """Referenced entity (space, user, image, reservation) does not exist"""

    code = "not_found"


class DuplicateNameError(DomainError):
    """Space name is already taken by another space"""

    code = "duplicate_name"


class InvalidAvailabilityError(DomainError):
    """Weekly availability set is incomplete or malformed"""

    code = "invalid_availability"


class InvalidRangeError(DomainError):
    """End date lies before start date"""

    code = "invalid_range"


class InvalidDeskError(DomainError):
    """Desk number is outside the space capacity"""

    code = "invalid_desk"


class InvalidArgumentError(DomainError):
    """Required argument (image file, caption) is missing"""

    code = "invalid_argument"
