from typing import Any, List, Optional


class RoutingError(Exception):
    """Base class for all contact-routing domain exceptions.

    Every custom exception in this module inherits from here so that a
    single ``except RoutingError`` clause can catch any domain error.
    """

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(detail)


class RoutingRulesNotFoundError(RoutingError):
    """Raised when a requested routing rule set does not exist."""

    def __init__(self, detail: str = "Routing rules not found"):
        super().__init__(detail)


class MemberNotFoundError(RoutingError):
    """Raised when a referenced member does not exist."""

    def __init__(self, detail: str = "Member not found"):
        super().__init__(detail)


class InvalidRoutingRulesError(RoutingError):
    """Raised when a rule set fails service-level validation.

    ``errors`` carries the individual issues (field path, message and
    offending value) so the API layer can return them verbatim.
    """

    def __init__(
        self,
        detail: str = "Routing rules validation failed",
        errors: Optional[List[Any]] = None,
    ):
        self.errors = errors or []
        super().__init__(detail)


class InvalidContactInfoError(RoutingError):
    """Raised when contact information fails service-level validation."""

    def __init__(
        self,
        detail: str = "Contact information validation failed",
        errors: Optional[List[Any]] = None,
    ):
        self.errors = errors or []
        super().__init__(detail)


class DuplicateMemberEmailError(RoutingError):
    """Raised when a member email is already used by another member."""

    def __init__(self, detail: str = "A member with this email already exists"):
        super().__init__(detail)
