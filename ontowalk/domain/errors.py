"""
Error taxonomy for the ontology walker.
"""
from typing import Optional


class OntowalkError(Exception):
    """Base class for all walker errors."""


class TypeMismatch(OntowalkError, TypeError):
    """A Term was read under a variant that is not the active one."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"bad cast: expected {expected.value}, term is {actual.value}")


class FetchFailure(OntowalkError):
    """Network or parse failure reported by a fetch adapter."""

    def __init__(self, uri: str, reason: str = ""):
        self.uri = uri
        self.reason = reason
        message = f"Failed to fetch {uri}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ObserverFailure(OntowalkError):
    """A visitor raised while a node was being dispatched."""

    def __init__(self, uri: str, cause: Optional[BaseException] = None):
        self.uri = uri
        self.cause = cause
        super().__init__(f"Visitor failed on {uri}: {cause!r}")
