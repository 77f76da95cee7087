"""Read-only queries against a WSDL document.

Every function takes a `Selector` carrying the resolved prefixes and the
`Prefix` objects it should qualify names with; none depends on another's
result.
"""

import logging

from wsdl2model.errors import MalformedDocument
from wsdl2model.model import (
    ComplexTypeRef, Operation, SchemaAttributes, SchemaImport)
from wsdl2model.selector import Prefix, Selector
from wsdl2model.xsd import complex_type_definitions

LOGGER = logging.getLogger(__name__)


def get_endpoint(selector: Selector, protocol: Prefix, soap: Prefix) -> str:
    return selector.string("//{}/{}/{}/{}/@location".format(
        protocol.qualify("definitions"),
        protocol.qualify("service"),
        protocol.qualify("port"),
        soap.qualify("address")))


def get_complex_types(selector: Selector, protocol: Prefix,
                      schema: Prefix) -> list:
    path = "//{}/{}/{}".format(
        protocol.qualify("types"),
        schema.qualify("schema"),
        schema.qualify("element"))
    return [
        ComplexTypeRef(node.get("name", ""), node.get("type", ""))
        for node in selector.nodes(path)]


def get_operations(selector: Selector, protocol: Prefix, soap: Prefix) -> list:
    "Binding operations carrying a SOAP action, in document order"
    path = "//{}/{}/{}".format(
        protocol.qualify("definitions"),
        protocol.qualify("binding"),
        protocol.qualify("operation"))
    action = f"./{soap.qualify('operation')}/@soapAction"
    operations = []
    for node in selector.nodes(path):
        operation = Operation(node.get("name", ""), selector.string(action, node))
        if not operation.soap_action:
            LOGGER.debug("Dropping operation %s: no SOAP action",
                         operation.name)
            continue
        operations.append(operation)
    return operations


def get_schema_attributes(selector: Selector, protocol: Prefix):
    # matched by local name: the schema may use a prefix of its own
    found = selector.nodes(
        f"//{protocol.qualify('types')}/*[local-name() = 'schema']")
    if not found:
        raise MalformedDocument("schema", "no inline schema under types")
    schema = found[0]
    return SchemaAttributes(
        target_namespace=schema.get("targetNamespace", ""),
        element_form_default=schema.get("elementFormDefault", ""))


def get_schema_imports(selector: Selector, protocol: Prefix,
                       schema: Prefix) -> list:
    path = "//{}/{}/{}".format(
        protocol.qualify("types"),
        schema.qualify("schema"),
        schema.qualify("import"))
    imports = []
    for node in selector.nodes(path):
        location = node.get("schemaLocation")
        if not location:
            LOGGER.debug("Import of %s has no schemaLocation",
                         node.get("namespace"))
            continue
        imports.append(SchemaImport(location))
    return imports


def get_local_types(selector: Selector, protocol: Prefix,
                    schema: Prefix) -> dict:
    "Complex type definitions declared in the inline schema"
    return complex_type_definitions(
        selector,
        "//{}/{}/{}".format(
            protocol.qualify("types"),
            schema.qualify("schema"),
            schema.qualify("complexType")),
        schema)
