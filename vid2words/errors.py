"""Exceptions raised by the analysis engine."""


class InvalidInputError(ValueError):
    """Input is neither a timestamped transcript string nor a sequence of entries."""
