from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Type, Union

from ontowalk.domain.errors import TypeMismatch


class TermKind(Enum):
    RESOURCE = "resource"
    LITERAL = "literal"
    BLANK = "blank"


@dataclass(frozen=True)
class Resource:
    """A resource reference. Empty when the parser yields no URI."""
    uri: str = ""

    def __str__(self):
        return self.uri


@dataclass(frozen=True)
class Literal:
    value: str
    datatype: Resource = Resource()
    language: Optional[str] = None

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class BlankNode:
    """Document-local anonymous node; ids are not comparable across documents."""
    node_id: str

    def __str__(self):
        return self.node_id


TermValue = Union[Resource, Literal, BlankNode]

_KIND_BY_TYPE = {
    Resource: TermKind.RESOURCE,
    Literal: TermKind.LITERAL,
    BlankNode: TermKind.BLANK,
}


@dataclass(frozen=True)
class Term:
    """
    Tagged union over the three RDF term variants.

    Exactly one variant is active. Reading the payload under another
    variant raises TypeMismatch.
    """
    kind: TermKind
    value: TermValue

    def __post_init__(self):
        actual = _KIND_BY_TYPE.get(type(self.value))
        if actual is None:
            raise ValueError(f"Unsupported term payload: {type(self.value).__name__}")
        if actual is not self.kind:
            raise ValueError(f"Term tagged {self.kind.value} holds a {actual.value} payload")

    @classmethod
    def resource(cls, uri: Optional[str]) -> "Term":
        return cls(TermKind.RESOURCE, Resource(uri or ""))

    @classmethod
    def literal(cls, value: str, datatype: Union[str, Resource, None] = None,
                language: Optional[str] = None) -> "Term":
        if not isinstance(datatype, Resource):
            datatype = Resource(datatype or "")
        return cls(TermKind.LITERAL, Literal(value, datatype, language))

    @classmethod
    def blank(cls, node_id: str) -> "Term":
        return cls(TermKind.BLANK, BlankNode(node_id))

    @classmethod
    def of(cls, value: TermValue) -> "Term":
        """Wrap an existing payload value."""
        kind = _KIND_BY_TYPE.get(type(value))
        if kind is None:
            raise ValueError(f"Unsupported term payload: {type(value).__name__}")
        return cls(kind, value)

    def is_resource(self) -> bool:
        return self.kind is TermKind.RESOURCE

    def is_literal(self) -> bool:
        return self.kind is TermKind.LITERAL

    def is_blank(self) -> bool:
        return self.kind is TermKind.BLANK

    def cast(self, expected: Union[TermKind, Type[TermValue]]) -> TermValue:
        """Project the term onto `expected` (a TermKind or payload class)."""
        if not isinstance(expected, TermKind):
            try:
                expected = _KIND_BY_TYPE[expected]
            except (KeyError, TypeError):
                raise ValueError(f"Not a term variant: {expected!r}") from None
        if expected is not self.kind:
            raise TypeMismatch(expected, self.kind)
        return self.value

    def as_resource(self) -> Resource:
        return self.cast(TermKind.RESOURCE)

    def as_literal(self) -> Literal:
        return self.cast(TermKind.LITERAL)

    def as_blank(self) -> BlankNode:
        return self.cast(TermKind.BLANK)

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Triple:
    subject: Term
    predicate: Term
    object: Term

    def __post_init__(self):
        for name in ("subject", "predicate", "object"):
            if not isinstance(getattr(self, name), Term):
                raise TypeError(f"Triple {name} must be a Term")

    @classmethod
    def from_values(cls, subject: str, predicate: str, obj: str) -> "Triple":
        """Build a triple of resource references from plain strings."""
        return cls(Term.resource(subject), Term.resource(predicate), Term.resource(obj))

    def to_tuple(self):
        return (self.subject, self.predicate, self.object)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.to_tuple())

    def __str__(self):
        return f"{self.subject} {self.predicate} {self.object}"
