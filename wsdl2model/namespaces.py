"Resolve protocol prefixes by URI and classify declared namespaces"

import logging

from wsdl2model.const import WSDL_NS, XSD_NS
from wsdl2model.errors import MalformedDocument, UnsupportedDocument
from wsdl2model.model import NamespaceEntry, NamespaceRole, SoapVersion
from wsdl2model.selector import Prefix, Selector, declarations

LOGGER = logging.getLogger(__name__)

DEFAULT_ROLE = NamespaceRole.SOAP


def resolve_prefix(root, uri: str, alias: str, step: str) -> Prefix:
    "Return the first prefix declared for `uri` anywhere in the document"
    for prefix, declared in declarations(root):
        if declared == uri:
            LOGGER.debug("%s: %r is bound to %s", step, prefix, uri)
            return Prefix(prefix, uri, alias)
    raise UnsupportedDocument(step, uri)


def resolve_protocol_prefix(root) -> Prefix:
    return resolve_prefix(root, WSDL_NS, "_wsdl", "protocol")


def resolve_soap_prefix(root, version) -> Prefix:
    version = SoapVersion.coerce(version)
    return resolve_prefix(root, version.namespace, "_soap", "soap")


def resolve_schema_prefix(root) -> Prefix:
    # a document without the XML Schema namespace has no inline schema
    try:
        return resolve_prefix(root, XSD_NS, "_xsd", "schema")
    except UnsupportedDocument as e:
        raise MalformedDocument(
            "schema", f"namespace {XSD_NS} is not declared") from e


def find_definitions(selector: Selector, protocol: Prefix):
    found = selector.nodes(f"//{protocol.qualify('definitions')}")
    if not found:
        raise MalformedDocument("definitions", "no definitions element")
    return found[0]


def role_rules(selector: Selector, protocol: Prefix, schema: Prefix) -> list:
    """Ordered (predicate, role) pairs; the first predicate that holds for
    a URI decides its role."""
    definitions = f"//{protocol.qualify('definitions')}[@targetNamespace=$uri]"
    schema_import = "//{}/{}/{}[@namespace=$uri]".format(
        protocol.qualify("types"),
        schema.qualify("schema"),
        schema.qualify("import"))
    return [
        (lambda uri: selector.exists(definitions, uri=uri), NamespaceRole.WSDL),
        (lambda uri: selector.exists(schema_import, uri=uri), NamespaceRole.XSD),
    ]


def role_for(uri: str, rules: list) -> NamespaceRole:
    for predicate, role in rules:
        if predicate(uri):
            return role
    return DEFAULT_ROLE


def classify(root, protocol: Prefix, schema: Prefix) -> dict:
    """Map every prefix in scope on the definitions element to its
    NamespaceEntry."""
    selector = Selector(root, protocol, schema)
    definitions = find_definitions(selector, protocol)
    rules = role_rules(selector, protocol, schema)
    namespaces = {}
    for prefix, uri in definitions.nsmap.items():
        prefix = prefix or ""
        namespaces[prefix] = NamespaceEntry(prefix, uri, role_for(uri, rules))
    return namespaces
