"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the comment streams rules that don't belong to a
    single entity: tree assembly, permissions and display decisions.
    """

    pass
