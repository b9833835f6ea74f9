class ParseError(ValueError):
    """A declared-numeric field of a record could not be parsed."""


class DimensionError(ValueError):
    """A matrix does not match the width of the normalization statistics."""
