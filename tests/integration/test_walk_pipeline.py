"""
End-to-end walk over linked RDF files on disk, through the use case
"""
import io

import pytest

from ontowalk.application.use_cases.walk_ontology import WalkOntologyUseCase
from ontowalk.domain.services.predicates import predicate_in
from ontowalk.domain.services.visitors import OutputTriples
from ontowalk.infrastructure.rdf_parser import RdfFileParser

SEE_ALSO = "http://www.w3.org/2000/01/rdf-schema#seeAlso"


@pytest.fixture
def linked_docs(tmp_path):
    """core.ttl -> animals.ttl, plants.ttl ; both -> shared.ttl -> core.ttl ; missing.ttl absent."""
    uri = {name: (tmp_path / f"{name}.ttl").as_uri() for name in
           ("core", "animals", "plants", "shared", "missing")}

    docs = {
        "core": f"""
            <{uri['core']}> <{SEE_ALSO}> <{uri['animals']}>, <{uri['plants']}> ;
                <http://www.w3.org/2000/01/rdf-schema#label> "Core" .
        """,
        "animals": f"""
            <{uri['animals']}> <{SEE_ALSO}> <{uri['shared']}> .
            <{uri['animals']}> <http://example.org/mentions> <{uri['missing']}> .
        """,
        "plants": f"""
            <{uri['plants']}> <{SEE_ALSO}> <{uri['shared']}> .
        """,
        "shared": f"""
            <{uri['shared']}> <{SEE_ALSO}> <{uri['core']}> .
        """,
    }
    for name, body in docs.items():
        (tmp_path / f"{name}.ttl").write_text(body, encoding="utf-8")
    return uri


@pytest.mark.parametrize("concurrent", [False, True])
def test_walk_linked_files(linked_docs, concurrent):
    use_case = WalkOntologyUseCase(RdfFileParser(), concurrent=concurrent, max_workers=2)

    report = use_case.execute(linked_docs["core"])

    # core lists animals before plants, so animals is discovered first
    assert report.visited_uris == [
        linked_docs["core"],
        linked_docs["animals"],
        linked_docs["plants"],
        linked_docs["shared"],
    ]
    assert report.node_count == 4
    assert linked_docs["missing"] not in report.visited_uris
    assert report.triple_count == 7
    assert report.execution_time >= 0


def test_walk_with_predicate_and_extra_visitor(linked_docs):
    buf = io.StringIO()
    use_case = WalkOntologyUseCase(RdfFileParser(), predicate=predicate_in(SEE_ALSO),
                                   visitors=[OutputTriples(buf)])

    report = use_case.execute(linked_docs["core"])

    assert report.node_count == 4
    assert report.triple_count == 5
    lines = buf.getvalue().splitlines()
    assert len(lines) == 5
    assert all(f" {SEE_ALSO} " in line for line in lines)
    assert lines[0].endswith(linked_docs["animals"])
    assert lines[1].endswith(linked_docs["plants"])


def test_walk_from_missing_document(linked_docs):
    report = WalkOntologyUseCase(RdfFileParser()).execute(linked_docs["missing"])
    assert report.visited_uris == []
    assert report.triples == []
