from ontowalk.domain.entities import Term, Triple
from ontowalk.domain.services.predicates import (
    admit_all,
    all_of,
    any_of,
    negate,
    object_is_resource,
    predicate_in,
    predicate_not_in,
)

SEE_ALSO = "http://www.w3.org/2000/01/rdf-schema#seeAlso"
LABEL = "http://www.w3.org/2000/01/rdf-schema#label"

FOLLOW = Triple.from_values("http://a", SEE_ALSO, "http://b")
NAMED = Triple(Term.resource("http://a"), Term.resource(LABEL), Term.literal("A"))


def test_admit_all():
    assert admit_all(FOLLOW)
    assert admit_all(NAMED)


def test_object_is_resource():
    assert object_is_resource(FOLLOW)
    assert not object_is_resource(NAMED)


def test_predicate_in_accepts_strings_and_terms():
    assert predicate_in(SEE_ALSO)(FOLLOW)
    assert not predicate_in(SEE_ALSO)(NAMED)
    assert predicate_in(Term.resource(LABEL))(NAMED)


def test_predicate_in_ignores_non_resource_predicates():
    odd = Triple(Term.resource("http://a"), Term.literal(SEE_ALSO), Term.resource("http://b"))
    assert not predicate_in(SEE_ALSO)(odd)


def test_predicate_not_in():
    pred = predicate_not_in(LABEL)
    assert pred(FOLLOW)
    assert not pred(NAMED)


def test_combinators():
    assert all_of(admit_all, object_is_resource)(FOLLOW)
    assert not all_of(admit_all, object_is_resource)(NAMED)
    assert any_of(object_is_resource, predicate_in(LABEL))(NAMED)
    assert not any_of()(FOLLOW)
    assert negate(object_is_resource)(NAMED)
