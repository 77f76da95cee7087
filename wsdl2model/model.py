"Value objects produced by a parse"

from dataclasses import asdict, dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from wsdl2model.const import SOAP11_NS, SOAP12_NS


class SoapVersion(str, Enum):
    V1_1 = "1.1"
    V1_2 = "1.2"

    @property
    def namespace(self) -> str:
        "The WSDL binding namespace for this SOAP version"
        return SOAP11_NS if self is SoapVersion.V1_1 else SOAP12_NS

    @classmethod
    def coerce(cls, value) -> "SoapVersion":
        "Accept a SoapVersion or its string form"
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"unsupported SOAP version {value!r}, expected one of "
                f"{', '.join(v.value for v in cls)}") from None


class NamespaceRole(str, Enum):
    WSDL = "wsdl"
    XSD = "xsd"
    SOAP = "soap"


@dataclass(frozen=True)
class NamespaceEntry:
    prefix: str
    uri: str
    role: NamespaceRole


@dataclass(frozen=True)
class ComplexTypeRef:
    "An element declared at the top level of the inline schema"
    name: str
    type: str


@dataclass(frozen=True)
class Operation:
    name: str
    soap_action: str


@dataclass(frozen=True)
class SchemaAttributes:
    target_namespace: str
    element_form_default: str


@dataclass(frozen=True)
class SchemaImport:
    schema_location: str


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    type: str
    min_occurs: str = "1"
    max_occurs: str = "1"


@dataclass(frozen=True)
class ComplexTypeDefinition:
    """A named complexType and the elements it contains, in document order.

    `base` is the extended type for complexContent extensions, otherwise
    the empty string.
    """
    name: str
    fields: tuple = ()
    base: str = ""


@dataclass(frozen=True)
class SchemaDocument:
    "A standalone XSD document"
    schema_attributes: SchemaAttributes
    complex_types: Mapping[str, ComplexTypeDefinition] = field(
        default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "complex_types", MappingProxyType(dict(self.complex_types)))


@dataclass(frozen=True)
class ParsedDocument:
    namespaces: Mapping[str, NamespaceEntry]
    endpoint: str
    complex_types: tuple
    operations: tuple
    schema_attributes: SchemaAttributes
    validation_types: Mapping[str, ComplexTypeDefinition]
    soap_version: SoapVersion

    def __post_init__(self):
        object.__setattr__(
            self, "namespaces", MappingProxyType(dict(self.namespaces)))
        object.__setattr__(
            self, "validation_types",
            MappingProxyType(dict(self.validation_types)))
        object.__setattr__(self, "complex_types", tuple(self.complex_types))
        object.__setattr__(self, "operations", tuple(self.operations))

    def to_dict(self) -> dict:
        "Plain, JSON-serialisable form"
        return {
            "namespaces": {
                prefix: {"value": entry.uri, "type": entry.role.value}
                for prefix, entry in self.namespaces.items()},
            "endpoint": self.endpoint,
            "complex_types": [asdict(ref) for ref in self.complex_types],
            "operations": [asdict(op) for op in self.operations],
            "schema_attributes": asdict(self.schema_attributes),
            "validation_types": {
                name: {
                    "base": definition.base,
                    "fields": [asdict(f) for f in definition.fields],
                } for name, definition in self.validation_types.items()},
            "soap_version": self.soap_version.value,
        }
