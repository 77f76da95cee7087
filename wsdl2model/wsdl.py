"Parse a WSDL document into a ParsedDocument"

import logging

from wsdl2model import extract
from wsdl2model.config import Settings, get_settings
from wsdl2model.imports import merge, resolve_imports
from wsdl2model.loader import DocumentLoader
from wsdl2model.model import ParsedDocument, SoapVersion
from wsdl2model.namespaces import (
    classify, resolve_protocol_prefix, resolve_schema_prefix,
    resolve_soap_prefix)
from wsdl2model.selector import Selector, parse_xml

LOGGER = logging.getLogger(__name__)


def parse(wsdl, file_path: str, soap_version=None,
          loader: DocumentLoader | None = None,
          settings: Settings | None = None) -> ParsedDocument:
    """Parse the WSDL text `wsdl`.

    `file_path` is where the document came from, a path or URL; schema
    imports are resolved relative to it. `soap_version` ("1.1" or "1.2")
    selects the SOAP binding to read and defaults to the configured one.
    """
    settings = settings or get_settings()
    if soap_version is None:
        soap_version = settings.soap_version
    version = SoapVersion.coerce(soap_version)
    loader = loader or DocumentLoader()

    root = parse_xml(wsdl, step="definitions")
    protocol = resolve_protocol_prefix(root)
    soap = resolve_soap_prefix(root, version)
    schema = resolve_schema_prefix(root)
    namespaces = classify(root, protocol, schema)

    selector = Selector(root, protocol, soap, schema)
    endpoint = extract.get_endpoint(selector, protocol, soap)
    complex_types = extract.get_complex_types(selector, protocol, schema)
    operations = extract.get_operations(selector, protocol, soap)
    schema_attributes = extract.get_schema_attributes(selector, protocol)

    local_types = extract.get_local_types(selector, protocol, schema)
    imported = resolve_imports(selector, str(file_path), protocol, schema,
                               loader)
    validation_types = merge(local_types, imported)

    LOGGER.info(
        "%s: %u operations, %u validation types (SOAP %s)",
        file_path, len(operations), len(validation_types), version.value)
    return ParsedDocument(
        namespaces=namespaces,
        endpoint=endpoint,
        complex_types=complex_types,
        operations=operations,
        schema_attributes=schema_attributes,
        validation_types=validation_types,
        soap_version=version)


def parse_from_file(path, soap_version=None,
                    loader: DocumentLoader | None = None,
                    settings: Settings | None = None) -> ParsedDocument:
    loader = loader or DocumentLoader()
    return parse(loader.fetch(str(path)), str(path), soap_version, loader,
                 settings)


def parse_from_url(url: str, soap_version=None,
                   loader: DocumentLoader | None = None,
                   settings: Settings | None = None) -> ParsedDocument:
    loader = loader or DocumentLoader()
    return parse(loader.fetch(url), url, soap_version, loader, settings)
