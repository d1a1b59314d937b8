"""Base class for domain services."""


class Service:
    """Base class for the forum's domain services.

    Services hold the rules that span records or need repositories: the
    vote ledger, the acceptance protocol, notification fan-out and the
    access gate. They take their collaborators in ``__init__`` and are
    built per request by the DI container.
    """
