"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Each content policy (slugs, word counts, publication, collections) is a
    small service composed by ``PostService``'s save pipeline or by the
    collection query engine.
    """

    pass
