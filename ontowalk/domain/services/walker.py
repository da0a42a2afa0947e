"""
Ontology Walker
Crawls an ontology (or any collection of connected RDF documents) by
following URIs that appear as objects of triples. Each successfully parsed
node is handed to a user-supplied visitor.
"""
import logging
import threading
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Deque, Iterable, List, Optional, Sequence, Set, Tuple, Union

from ontowalk.domain.entities import Triple
from ontowalk.domain.errors import FetchFailure, ObserverFailure
from ontowalk.domain.ports import FetchResult, IFetcher, TriplePredicate, Visitor
from ontowalk.domain.services.predicates import admit_all
from ontowalk.domain.services.visitors import AggregateVisitor

logger = logging.getLogger(__name__)


class OntologyWalker:
    """
    Breadth-first walk over RDF documents.

    Keeps a closed set of URIs already attempted. A URI is closed before it
    is fetched, so a node that fails to fetch is never retried in the same
    walk. Duplicates are allowed in the frontier and dropped on dequeue.
    """

    def __init__(self, visitor: Union[Visitor, Sequence[Visitor]],
                 predicate: Optional[TriplePredicate] = None,
                 fetcher: Optional[IFetcher] = None):
        if isinstance(visitor, (list, tuple)):
            visitor = AggregateVisitor(*visitor)
        if not callable(visitor):
            raise TypeError(f"Visitor must be callable, got {type(visitor).__name__}")
        self.visitor = visitor
        if fetcher is None:
            raise TypeError("OntologyWalker needs a fetcher; use "
                            "ontowalk.infrastructure.di_container.make_ontology_walker "
                            "for the default web parser")
        self.predicate = predicate or admit_all
        self.fetcher = fetcher

    def walk(self, start_uri: str) -> None:
        closed: Set[str] = set()
        frontier: Deque[str] = deque([start_uri])
        visited = 0

        while frontier:
            uri = frontier.popleft()
            if uri in closed:
                continue
            closed.add(uri)

            result = self._fetch(uri)
            if not result.ok:
                continue

            frontier.extend(self._visit(uri, result.triples))
            visited += 1

        logger.info(f"Walk from {start_uri} finished: {visited} visited, {len(closed)} attempted")

    def __call__(self, start_uri: str) -> None:
        self.walk(start_uri)

    def _fetch(self, uri: str) -> FetchResult:
        try:
            result = self.fetcher.fetch(uri)
        except FetchFailure as e:
            logger.warning(f"Fetcher raised for {uri}: {e}")
            return FetchResult.failed()
        if not result.ok:
            logger.debug(f"Skipping {uri}: fetch failed")
        return result

    def _visit(self, uri: str, triples: Iterable[Triple]) -> List[str]:
        """Filter, dispatch to the visitor and return the discovered URIs."""
        triples = tuple(triples)
        admitted = tuple(t for t in triples if self.predicate(t))
        logger.debug(f"Visiting {uri}: {len(admitted)}/{len(triples)} triples admitted")

        try:
            self.visitor(uri, admitted)
        except ObserverFailure:
            raise
        except Exception as e:
            raise ObserverFailure(uri, e) from e

        return [str(t.object) for t in admitted if t.object.is_resource()]


class _ClosedSet:
    """Set of attempted URIs with an atomic insert-if-absent."""

    def __init__(self):
        self._items: Set[str] = set()
        self._lock = threading.Lock()

    def add_if_absent(self, uri: str) -> bool:
        with self._lock:
            if uri in self._items:
                return False
            self._items.add(uri)
            return True

    def __contains__(self, uri: str) -> bool:
        with self._lock:
            return uri in self._items

    def __len__(self):
        with self._lock:
            return len(self._items)


class ConcurrentOntologyWalker(OntologyWalker):
    """
    Walker that fetches up to `max_workers` nodes in parallel.

    Fetch results are processed on the calling thread in dequeue order, so
    visitors are never called concurrently and the visit order matches
    OntologyWalker. `cancel_event` is checked before every fetch dispatch
    and every visit.
    """

    def __init__(self, visitor: Union[Visitor, Sequence[Visitor]],
                 predicate: Optional[TriplePredicate] = None,
                 fetcher: Optional[IFetcher] = None,
                 max_workers: int = 4,
                 cancel_event: Optional[threading.Event] = None):
        super().__init__(visitor, predicate, fetcher)
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers
        self.cancel_event = cancel_event or threading.Event()

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def walk(self, start_uri: str) -> None:
        closed = _ClosedSet()
        frontier: Deque[str] = deque([start_uri])
        visited = 0

        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix="ontowalk") as pool:
            while frontier and not self.cancelled:
                batch = self._dispatch_batch(pool, frontier, closed)
                try:
                    for uri, future in batch:
                        result = future.result()
                        if self.cancelled:
                            break
                        if not result.ok:
                            continue
                        frontier.extend(self._visit(uri, result.triples))
                        visited += 1
                finally:
                    for _, future in batch:
                        future.cancel()

        if self.cancelled:
            logger.info(f"Walk from {start_uri} cancelled after {visited} visited")
        else:
            logger.info(f"Walk from {start_uri} finished: {visited} visited, {len(closed)} attempted")

    def _dispatch_batch(self, pool: ThreadPoolExecutor, frontier: Deque[str],
                        closed: _ClosedSet) -> List[Tuple[str, "Future[FetchResult]"]]:
        batch = []
        while frontier and len(batch) < self.max_workers:
            if self.cancelled:
                break
            uri = frontier.popleft()
            if not closed.add_if_absent(uri):
                continue
            batch.append((uri, pool.submit(self._fetch, uri)))
        return batch
