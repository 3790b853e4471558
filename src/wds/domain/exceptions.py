"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
None of them is fatal: the caller shows the message and may retry.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidTransition(DomainException):
    """The requested status change is not allowed from the current state."""


class ClaimConflict(DomainException):
    """Another driver claimed the order first.

    The caller should refresh its list of claimable orders.
    """


class UpstreamUnavailable(DomainException):
    """A payment, auth or email collaborator failed or could not be reached."""
