from typing import Any


class UnknownParameter(ValueError):
    """
    Raised when a lookup names a query parameter that the tracking API does not define.
    It always points at a programming error in the caller, so it is never retried.
    """

    def __init__(self, identifier):
        # type: (Any) -> None
        super(UnknownParameter, self).__init__("unknown tracking query parameter: {!r}".format(identifier))
        self.identifier = identifier
