"""
Visitors for use with the ontology walker.

A visitor is called once per successfully fetched node with the node's URI
and the triples that passed the edge-admission predicate. Any plain
callable taking (uri, triples) works as a visitor; the classes here are the
pre-built ones plus the aggregate that fans one visit out to many.
"""
import sys
from typing import List, Optional, Sequence, TextIO

from ontowalk.domain.entities import Triple
from ontowalk.domain.ports import IVisitor, TriplePredicate, Visitor

SEPARATOR = "=" * 62


class AggregateVisitor(IVisitor):
    """
    Combine several visitors and call them one by one when a node is visited.

    Components are called in registration order with the identical
    (uri, triples) pair. The first one to raise stops the dispatch.
    """

    def __init__(self, *visitors: Visitor):
        for v in visitors:
            if not callable(v):
                raise TypeError(f"Visitor must be callable, got {type(v).__name__}")
        self.visitors = tuple(visitors)

    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        triples = tuple(triples)
        for v in self.visitors:
            v(uri, triples)

    def __len__(self):
        return len(self.visitors)


def make_aggregate(*visitors: Visitor) -> AggregateVisitor:
    return AggregateVisitor(*visitors)


class PrintTriples(IVisitor):
    """Print the triples as they are discovered, then a separator line."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        out = self.stream or sys.stdout
        for t in triples:
            print(t, file=out)
        print(SEPARATOR, file=out, flush=True)


class PrintUris(IVisitor):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        print(uri, file=self.stream or sys.stdout)


class OutputTriples(IVisitor):
    """Write one triple per line to a caller-owned stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        for t in triples:
            self.stream.write(f"{t}\n")


class StoreTriples(IVisitor):
    def __init__(self, store: List[Triple]):
        self.store = store

    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        self.store.extend(triples)


class StoreTriplesIf(IVisitor):
    """Store only the triples matching `predicate`."""

    def __init__(self, store: List[Triple], predicate: TriplePredicate):
        self.store = store
        self.predicate = predicate

    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        self.store.extend(t for t in triples if self.predicate(t))


class StoreUris(IVisitor):
    def __init__(self, store: List[str]):
        self.store = store

    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        self.store.append(uri)


class CountNodes(IVisitor):
    def __init__(self, start: int = 0):
        self.count = start

    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        self.count += 1
