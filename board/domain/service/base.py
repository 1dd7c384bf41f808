"""Domain service base."""


class Service:
    """Marker base for domain services.

    Services own the business rules that touch more than one repository,
    such as the single-vote rule spanning votes, users and requests.
    """
