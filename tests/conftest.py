import pytest

from ontowalk.domain.entities import Triple
from ontowalk.domain.ports import FetchResult, IFetcher

EX = "http://example.org/"
LINK = EX + "links"
LABEL = "http://www.w3.org/2000/01/rdf-schema#label"


class FakeFetcher(IFetcher):
    """In-memory graph: uri -> list of triples, or None for a failing node."""

    def __init__(self, graph):
        self.graph = graph
        self.calls = []

    def fetch(self, uri):
        self.calls.append(uri)
        triples = self.graph.get(uri)
        if triples is None:
            return FetchResult.failed()
        return FetchResult(True, tuple(triples))


def link(s, o, p=LINK):
    return Triple.from_values(s, p, o)


def graph_of(edges, failing=()):
    """Build a FakeFetcher graph from {uri: [object uris]}."""
    graph = {uri: [link(uri, o) for o in objs] for uri, objs in edges.items()}
    for uri in failing:
        graph[uri] = None
    return graph


@pytest.fixture
def diamond():
    # A -> B, C ; B -> D ; C -> D
    return FakeFetcher(graph_of({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}))
