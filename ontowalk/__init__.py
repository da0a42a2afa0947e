"""
Ontology Walker Package

Structure:
- domain/: Term model, ports, walker and visitors
- application/: Use cases built on the walker
- infrastructure/: RDF fetch/parse adapters, settings, DI container
"""
__version__ = "0.1.0"

# Note: Import specific modules as needed to avoid circular dependencies
# Example: from ontowalk.domain.services.walker import OntologyWalker
