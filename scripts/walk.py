"""
Walk an ontology from a start URI and print what was visited.

Usage:
    python scripts/walk.py http://example.org/onto.rdf --print triples
    python scripts/walk.py ./data/core.ttl --local --predicate http://www.w3.org/2000/01/rdf-schema#seeAlso
"""
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

# Setup path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ontowalk.domain.errors import ObserverFailure
from ontowalk.domain.services.predicates import predicate_in
from ontowalk.domain.services.visitors import CountNodes, PrintTriples, PrintUris
from ontowalk.infrastructure.di_container import get_container


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crawl linked RDF documents breadth-first")
    parser.add_argument("start_uri", help="URI (or local path with --local) to start from")
    parser.add_argument("--print", dest="show", choices=["uris", "triples", "none"], default="uris",
                        help="What to print for each visited node")
    parser.add_argument("--predicate", action="append", default=[],
                        help="Only follow/report triples with this predicate (repeatable)")
    parser.add_argument("--local", action="store_true", help="Read documents from the filesystem")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    container = get_container()
    counter = CountNodes()
    visitors = [counter]
    if args.show == "uris":
        visitors.append(PrintUris())
    elif args.show == "triples":
        visitors.append(PrintTriples())

    predicate = predicate_in(*args.predicate) if args.predicate else None
    fetcher = container.file_fetcher() if args.local else container.fetcher()
    walker = container.walker(visitors, predicate, fetcher)

    try:
        walker.walk(args.start_uri)
    except ObserverFailure as e:
        print(f"Walk aborted: {e}", file=sys.stderr)
        return 1

    print(f"Visited {counter.count} nodes.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
