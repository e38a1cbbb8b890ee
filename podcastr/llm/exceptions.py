class GenerationError(Exception):
    """
    Raised when a generative AI call fails or returns unusable content.

    The underlying exception, if any, is chained as __cause__.
    """
