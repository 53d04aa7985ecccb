"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the toplist rules that span aggregates, such as vote
    admission touching both votes and the server counter.
    """

    pass
