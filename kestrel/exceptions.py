class InvalidDsn(ValueError):
    """
    Raised when a DSN cannot be turned into an endpoint
    """


class InvalidAcknowledgment(ValueError):
    """
    Raised when the server answers a send with a body that is not a
    JSON object
    """
