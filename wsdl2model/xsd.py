"Read complex type definitions out of XML Schema documents"

import logging

from wsdl2model.errors import MalformedDocument
from wsdl2model.loader import DocumentLoader
from wsdl2model.model import (
    ComplexTypeDefinition, FieldDefinition, SchemaAttributes, SchemaDocument)
from wsdl2model.namespaces import resolve_schema_prefix
from wsdl2model.selector import Prefix, Selector, parse_xml

LOGGER = logging.getLogger(__name__)

FIELD_CONTAINERS = ("sequence", "all", "choice")


def field_paths(schema: Prefix) -> str:
    "Union of the paths to a complexType's member elements"
    extension = "{}/{}".format(
        schema.qualify("complexContent"), schema.qualify("extension"))
    paths = []
    for parent in ("", extension + "/"):
        for container in FIELD_CONTAINERS:
            paths.append("./{}{}/{}".format(
                parent, schema.qualify(container), schema.qualify("element")))
    return " | ".join(paths)


def read_field(element) -> FieldDefinition:
    ref = element.get("ref", "")
    return FieldDefinition(
        name=element.get("name") or ref,
        type=element.get("type") or ref,
        min_occurs=element.get("minOccurs", "1"),
        max_occurs=element.get("maxOccurs", "1"))


def read_complex_type(selector: Selector, node, schema: Prefix):
    base = selector.string("./{}/{}/@base".format(
        schema.qualify("complexContent"), schema.qualify("extension")), node)
    fields = [read_field(e) for e in selector.nodes(field_paths(schema), node)]
    return ComplexTypeDefinition(node.get("name", ""), tuple(fields), base)


def complex_type_definitions(selector: Selector, path: str,
                             schema: Prefix) -> dict:
    "Definitions of the named complexTypes matching `path`, keyed by name"
    types = {}
    for node in selector.nodes(path):
        definition = read_complex_type(selector, node, schema)
        if not definition.name:
            continue
        types[definition.name] = definition
    return types


def parse(text) -> SchemaDocument:
    "Parse a standalone XSD document"
    root = parse_xml(text, step="schema")
    schema = resolve_schema_prefix(root)
    selector = Selector(root, schema)
    if not selector.exists(f"/{schema.qualify('schema')}"):
        raise MalformedDocument("schema", "root element is not a schema")
    types = complex_type_definitions(
        selector,
        "/{}/{}".format(schema.qualify("schema"), schema.qualify("complexType")),
        schema)
    LOGGER.debug("Read %u complex types", len(types))
    return SchemaDocument(
        SchemaAttributes(
            target_namespace=root.get("targetNamespace", ""),
            element_form_default=root.get("elementFormDefault", "")),
        types)


def parse_from_file(path, loader: DocumentLoader | None = None):
    loader = loader or DocumentLoader()
    return parse(loader.fetch(str(path)))


def parse_from_url(url: str, loader: DocumentLoader | None = None):
    loader = loader or DocumentLoader()
    return parse(loader.fetch(url))
