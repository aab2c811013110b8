"""Domain errors raised by services and mapped to HTTP responses in main."""


class NotFoundError(LookupError):
    """A referenced row does not exist or is not owned by the caller."""


class AlreadyExistsError(ValueError):
    """A unique business key is already taken."""
