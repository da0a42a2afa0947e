from abc import ABC, abstractmethod
from typing import Callable, NamedTuple, Sequence, Tuple, Union

from ontowalk.domain.entities import Triple


class FetchResult(NamedTuple):
    ok: bool
    triples: Tuple[Triple, ...] = ()

    @classmethod
    def failed(cls) -> "FetchResult":
        return cls(False, ())


class IFetcher(ABC):
    @abstractmethod
    def fetch(self, uri: str) -> FetchResult:
        """
        Retrieve and parse the document behind `uri`.

        Network and parse failures are reported as ok=False with no
        triples, never raised.
        """
        pass


class IVisitor(ABC):
    @abstractmethod
    def visit(self, uri: str, triples: Sequence[Triple]) -> None:
        pass

    def __call__(self, uri: str, triples: Sequence[Triple]) -> None:
        self.visit(uri, triples)


Visitor = Union[IVisitor, Callable[[str, Sequence[Triple]], None]]
TriplePredicate = Callable[[Triple], bool]
