import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ontowalk.domain.entities import Triple
from ontowalk.domain.ports import IFetcher, TriplePredicate, Visitor
from ontowalk.domain.services.visitors import AggregateVisitor, StoreTriples, StoreUris
from ontowalk.domain.services.walker import ConcurrentOntologyWalker, OntologyWalker


@dataclass
class WalkReport:
    start_uri: str
    visited_uris: List[str] = field(default_factory=list)
    triples: List[Triple] = field(default_factory=list)
    execution_time: float = 0.0

    @property
    def node_count(self):
        return len(self.visited_uris)

    @property
    def triple_count(self):
        return len(self.triples)


class WalkOntologyUseCase:
    def __init__(self, fetcher: IFetcher, predicate: Optional[TriplePredicate] = None,
                 visitors: Sequence[Visitor] = (), concurrent: bool = False,
                 max_workers: int = 4):
        self.fetcher = fetcher
        self.predicate = predicate
        self.visitors = tuple(visitors)
        self.concurrent = concurrent
        self.max_workers = max_workers

    def execute(self, start_uri: str) -> WalkReport:
        report = WalkReport(start_uri=start_uri)
        visitor = AggregateVisitor(
            StoreUris(report.visited_uris),
            StoreTriples(report.triples),
            *self.visitors,
        )

        if self.concurrent:
            walker = ConcurrentOntologyWalker(visitor, self.predicate, self.fetcher,
                                              max_workers=self.max_workers)
        else:
            walker = OntologyWalker(visitor, self.predicate, self.fetcher)

        start = time.time()
        walker.walk(start_uri)
        report.execution_time = time.time() - start

        return report
