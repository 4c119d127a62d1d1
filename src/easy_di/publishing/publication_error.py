class PublicationError(Exception):
    """Raised when a publication can't be planned, signed or uploaded."""
