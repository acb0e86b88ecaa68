"""Exceptions raised while building a statement."""


class StatementError(Exception):
    """Base class for failures that abort a statement."""
    pass


class UnsupportedGenre(StatementError, ValueError):
    """Raised when a play's genre has no pricing rule."""

    def __init__(self, genre):
        self.genre = genre
        super().__init__(f'unknown type: {genre}')


class UnknownPlay(StatementError, LookupError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id):
        self.play_id = play_id
        super().__init__(f'unknown play: {play_id}')


class ConfigError(StatementError, ValueError):
    """Raised when a plays or invoices file cannot be understood."""
    pass
