"""Follow the inline schema's imports and merge their complex types.

Imports are followed one level deep: the imports of an imported schema are
not fetched. An import that cannot be fetched or parsed contributes no
types, so the parse of the WSDL itself never fails because of one.
"""

from functools import reduce
import logging

from wsdl2model import xsd
from wsdl2model.errors import (
    ImportResolutionFailure, MalformedDocument, RetrievalFailure)
from wsdl2model.extract import get_schema_imports
from wsdl2model.loader import DocumentLoader, resolve_location
from wsdl2model.selector import Prefix, Selector

LOGGER = logging.getLogger(__name__)


def import_schema(schema_location: str, base_path: str,
                  loader: DocumentLoader):
    "Fetch and parse the schema at `schema_location`, relative to `base_path`"
    try:
        location = resolve_location(schema_location, base_path)
    except ValueError as e:
        raise ImportResolutionFailure(schema_location, e) from e
    try:
        return xsd.parse(loader.fetch(location))
    except (RetrievalFailure, MalformedDocument) as e:
        raise ImportResolutionFailure(location, e) from e


def imported_types(schema_location: str, base_path: str,
                   loader: DocumentLoader) -> dict:
    "Complex types of the imported schema, or {} if it can't be read"
    try:
        return dict(
            import_schema(schema_location, base_path, loader).complex_types)
    except ImportResolutionFailure as e:
        LOGGER.warning("Skipping schema import: %s", e)
        return {}


def resolve_imports(selector: Selector, base_path: str, protocol: Prefix,
                    schema: Prefix, loader: DocumentLoader) -> list:
    "One type map per import, in declaration order"
    imports = get_schema_imports(selector, protocol, schema)
    LOGGER.debug("%s: %u schema imports", base_path, len(imports))
    return [
        imported_types(i.schema_location, base_path, loader)
        for i in imports]


def merge(local_types: dict, imported_type_sets: list) -> dict:
    """Fold the imported type maps over the local ones. The last map merged
    wins a collision, so any import overrides a local definition and a later
    import overrides an earlier one."""
    return reduce(
        lambda merged, types: {**merged, **types},
        imported_type_sets,
        dict(local_types))
