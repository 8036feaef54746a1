"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several aggregates, such as
    votes moving reputation between users.
    """

    pass
