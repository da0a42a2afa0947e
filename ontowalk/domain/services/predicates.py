"""
Edge-admission predicates.

A predicate takes a Triple and returns True when the triple should be
delivered to the visitors and followed for new edges.
"""
from typing import Iterable

from ontowalk.domain.entities import Term, Triple
from ontowalk.domain.ports import TriplePredicate


def admit_all(triple: Triple) -> bool:
    return True


def object_is_resource(triple: Triple) -> bool:
    return triple.object.is_resource()


def _uris(values: Iterable) -> frozenset:
    return frozenset(str(v) if isinstance(v, Term) else v for v in values)


def predicate_in(*uris) -> TriplePredicate:
    """Admit triples whose predicate is one of `uris`."""
    allowed = _uris(uris)

    def _pred(triple: Triple) -> bool:
        return triple.predicate.is_resource() and str(triple.predicate) in allowed

    return _pred


def predicate_not_in(*uris) -> TriplePredicate:
    excluded = _uris(uris)

    def _pred(triple: Triple) -> bool:
        return str(triple.predicate) not in excluded

    return _pred


def all_of(*preds: TriplePredicate) -> TriplePredicate:
    def _pred(triple: Triple) -> bool:
        return all(p(triple) for p in preds)

    return _pred


def any_of(*preds: TriplePredicate) -> TriplePredicate:
    def _pred(triple: Triple) -> bool:
        return any(p(triple) for p in preds)

    return _pred


def negate(pred: TriplePredicate) -> TriplePredicate:
    def _pred(triple: Triple) -> bool:
        return not pred(triple)

    return _pred
