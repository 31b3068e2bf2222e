class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"
    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"
    status_code = 400


class AuthenticationError(DomainError):
    """Raised when login credentials or an admin token are invalid."""

    code = "authentication_failed"
    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""

    code = "forbidden"
    status_code = 403


class NotFoundError(DomainError):
    code = "not_found"
    status_code = 404


class ConflictError(DomainError):
    code = "conflict"
    status_code = 409


class ClockEventRejected(DomainError):
    """A clock event was refused; no session state was changed."""

    code = "clock_rejected"
    status_code = 403


class NotRegisteredError(ClockEventRejected):
    code = "not_registered"


class NotApprovedError(ClockEventRejected):
    code = "not_approved"


class NoStoreForBranchError(ClockEventRejected):
    code = "no_store_for_branch"


class OutOfRangeError(ClockEventRejected):
    code = "out_of_range"
