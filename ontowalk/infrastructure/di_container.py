"""
Dependency Injection Container
Manages singleton instances of the walker's collaborators.
"""
import logging
from typing import Optional, Sequence, Union

from ontowalk.domain.ports import IFetcher, TriplePredicate, Visitor
from ontowalk.infrastructure.config import WalkerSettings

logger = logging.getLogger(__name__)


class DIContainer:
    _instance = None

    def __init__(self, settings: Optional[WalkerSettings] = None):
        self._services = {}
        if settings is not None:
            self._services["settings"] = settings

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = DIContainer()
        return cls._instance

    def settings(self) -> WalkerSettings:
        if "settings" not in self._services:
            self._services["settings"] = WalkerSettings.from_env()
        return self._services["settings"]

    def fetcher(self) -> IFetcher:
        if "fetcher" not in self._services:
            from ontowalk.infrastructure.rdf_parser import RdfWebParser
            settings = self.settings()
            logger.debug(f"Initializing RDF web parser (format={settings.format or 'auto'})")
            self._services["fetcher"] = RdfWebParser(
                format=settings.format,
                timeout=settings.timeout,
                headers={"User-Agent": settings.user_agent},
            )
        return self._services["fetcher"]

    def file_fetcher(self) -> IFetcher:
        if "file_fetcher" not in self._services:
            from ontowalk.infrastructure.rdf_parser import RdfFileParser
            self._services["file_fetcher"] = RdfFileParser(format=self.settings().format)
        return self._services["file_fetcher"]

    def walker(self, visitor: Union[Visitor, Sequence[Visitor]],
               predicate: Optional[TriplePredicate] = None,
               fetcher: Optional[IFetcher] = None):
        """Build a walker; the concurrent one when settings ask for it."""
        from ontowalk.domain.services.walker import ConcurrentOntologyWalker, OntologyWalker

        settings = self.settings()
        fetcher = fetcher or self.fetcher()
        if settings.concurrent:
            return ConcurrentOntologyWalker(visitor, predicate, fetcher,
                                            max_workers=settings.max_workers)
        return OntologyWalker(visitor, predicate, fetcher)


def get_container():
    return DIContainer.get_instance()


def make_ontology_walker(visitor: Union[Visitor, Sequence[Visitor]],
                         predicate: Optional[TriplePredicate] = None,
                         fetcher: Optional[IFetcher] = None):
    """Sequential walker; falls back to the container's web parser."""
    from ontowalk.domain.services.walker import OntologyWalker

    return OntologyWalker(visitor, predicate, fetcher or get_container().fetcher())
