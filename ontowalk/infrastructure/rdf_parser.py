"""
RDF fetch/parse adapters.
Download an RDF document (or read it from disk) and parse it with rdflib
into ontowalk Triples. Failures are reported as FetchResult(ok=False).
"""
import logging
import os
import threading
from typing import Dict, List, Optional, Tuple
from urllib.parse import unquote, urlparse
from xml.sax import SAXException

import rdflib
import requests
from rdflib import BNode, URIRef
from rdflib import Literal as RDFLiteral
from rdflib.exceptions import Error as RDFLibError
from rdflib.util import guess_format

from ontowalk import __version__
from ontowalk.domain.entities import Term, Triple
from ontowalk.domain.ports import FetchResult, IFetcher

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "xml"

ACCEPT_HEADER = (
    "application/rdf+xml, text/turtle;q=0.9, application/n-triples;q=0.8, "
    "application/ld+json;q=0.7, text/n3;q=0.6, */*;q=0.1"
)

# Content type -> rdflib parser name
CONTENT_TYPE_FORMATS = {
    "application/rdf+xml": "xml",
    "application/xml": "xml",
    "text/xml": "xml",
    "text/turtle": "turtle",
    "application/x-turtle": "turtle",
    "application/n-triples": "nt",
    "text/n3": "n3",
    "application/ld+json": "json-ld",
    "application/trig": "trig",
    "application/n-quads": "nquads",
}

# Turtle/N3 BadSyntax is a SyntaxError; JSON and decoding errors are ValueErrors;
# unknown formats and N-Triples errors derive from rdflib's Error.
PARSE_ERRORS = (SyntaxError, SAXException, RDFLibError, ValueError)


class OrderedGraph(rdflib.Graph):
    """Graph that also records statements in the order the parser emits them."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.statements: List[tuple] = []

    def add(self, triple):
        if triple not in self:
            self.statements.append(triple)
        return super().add(triple)


def term_from_rdflib(node) -> Term:
    """Convert one rdflib node into a Term."""
    if isinstance(node, URIRef):
        return Term.resource(str(node))
    if isinstance(node, RDFLiteral):
        datatype = str(node.datatype) if node.datatype is not None else ""
        return Term.literal(str(node), datatype, node.language)
    if isinstance(node, BNode):
        return Term.blank(str(node))
    raise ValueError(f"bad rdf data: {type(node).__name__}")


def triples_from_graph(graph: rdflib.Graph) -> Tuple[Triple, ...]:
    """
    Convert a parsed graph into Triples.
    An OrderedGraph yields document order; statements its parser wrote
    straight to the store (JSON-LD) follow in store order.
    """
    statements = list(graph)
    if isinstance(graph, OrderedGraph):
        recorded = set(graph.statements)
        statements = graph.statements + [t for t in statements if t not in recorded]
    return tuple(
        Triple(term_from_rdflib(s), term_from_rdflib(p), term_from_rdflib(o))
        for s, p, o in statements
    )


def format_for_content_type(content_type: Optional[str]) -> Optional[str]:
    if not content_type:
        return None
    mime = content_type.split(";", 1)[0].strip().lower()
    return CONTENT_TYPE_FORMATS.get(mime)


class RdfWebParser(IFetcher):
    """
    Download an RDF document over HTTP and parse it into triples.

    The parser format is, in order: the configured `format`, the response
    content type, a guess from the URI extension, then RDF/XML.

    Without an explicit `session` each thread gets its own requests.Session,
    so one parser can serve the concurrent walker. An explicit session is
    shared as-is.
    """

    def __init__(self, format: Optional[str] = None, timeout: float = 10.0,
                 headers: Optional[Dict[str, str]] = None,
                 session: Optional[requests.Session] = None):
        self.format = format
        self.timeout = float(timeout)
        self.headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": f"ontowalk/{__version__}",
        }
        self.headers.update(headers or {})
        self.session = session
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._lock = threading.Lock()

    def get_session(self) -> requests.Session:
        if self.session is not None:
            return self.session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    def fetch(self, uri: str) -> FetchResult:
        try:
            response = self.get_session().get(uri, headers=self.headers, timeout=self.timeout,
                                              allow_redirects=True)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Failed to download {uri}: {e}")
            return FetchResult.failed()

        fmt = (
            self.format
            or format_for_content_type(response.headers.get("Content-Type"))
            or guess_format(uri)
            or DEFAULT_FORMAT
        )
        return self._parse(uri, response.content, fmt)

    def _parse(self, uri: str, data: bytes, fmt: str) -> FetchResult:
        graph = OrderedGraph()
        try:
            graph.parse(data=data, format=fmt, publicID=uri)
            triples = triples_from_graph(graph)
        except PARSE_ERRORS as e:
            logger.warning(f"Failed to parse {uri} as {fmt}: {e}")
            return FetchResult.failed()
        logger.debug(f"Parsed {len(triples)} triples from {uri}")
        return FetchResult(True, triples)

    def close(self) -> None:
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        if self.session is not None:
            self.session.close()


class RdfFileParser(IFetcher):
    """Parse RDF documents from the local filesystem (plain paths or file:// URIs)."""

    def __init__(self, format: Optional[str] = None):
        self.format = format

    def fetch(self, uri: str) -> FetchResult:
        path = self._to_path(uri)
        if not os.path.isfile(path):
            logger.warning(f"No such RDF file: {path}")
            return FetchResult.failed()

        fmt = self.format or guess_format(path) or DEFAULT_FORMAT
        graph = OrderedGraph()
        try:
            graph.parse(path, format=fmt)
            triples = triples_from_graph(graph)
        except PARSE_ERRORS as e:
            logger.warning(f"Failed to parse {path} as {fmt}: {e}")
            return FetchResult.failed()
        return FetchResult(True, triples)

    @staticmethod
    def _to_path(uri: str) -> str:
        parsed = urlparse(uri)
        if parsed.scheme == "file":
            return unquote(parsed.path)
        return uri
