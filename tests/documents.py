"""Document builders and HTTP stubs shared by the tests."""

from __future__ import annotations

from pathlib import Path

from requests.exceptions import HTTPError

SOAP11_NS = "http://schemas.xmlsoap.org/wsdl/soap/"
SOAP12_NS = "http://schemas.xmlsoap.org/wsdl/soap12/"


def build_wsdl(
    operations=(("GetStatus", "urn:svc/GetStatus"),),
    imports=(),
    endpoint="http://host/svc",
    local_types="",
    soap_ns=SOAP11_NS,
) -> str:
    """A SOAP binding WSDL using conventional prefixes.

    `imports` holds (namespace, schemaLocation) pairs for the inline schema.
    `operations` holds (name, soapAction) pairs; a None action leaves out the
    soap:operation element.
    """
    import_tags = "\n".join(
        f'<xsd:import namespace="{namespace}" schemaLocation="{location}"/>'
        for namespace, location in imports
    )
    operation_tags = []
    for name, action in operations:
        inner = "" if action is None else f'<soap:operation soapAction="{action}"/>'
        operation_tags.append(f'<wsdl:operation name="{name}">{inner}</wsdl:operation>')
    operation_tags = "\n".join(operation_tags)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
    xmlns:soap="{soap_ns}"
    xmlns:xsd="http://www.w3.org/2001/XMLSchema"
    xmlns:tns="urn:svc"
    xmlns:common="urn:common"
    targetNamespace="urn:svc">
  <wsdl:types>
    <xsd:schema targetNamespace="urn:svc" elementFormDefault="qualified">
      {import_tags}
      <xsd:element name="GetStatusRequest" type="tns:GetStatusRequestType"/>
      <xsd:element name="GetStatusResponse" type="tns:Status"/>
      <xsd:complexType name="GetStatusRequestType">
        <xsd:sequence>
          <xsd:element name="id" type="xsd:string"/>
        </xsd:sequence>
      </xsd:complexType>
      {local_types}
    </xsd:schema>
  </wsdl:types>
  <wsdl:binding name="SvcBinding" type="tns:SvcPortType">
    <soap:binding transport="http://schemas.xmlsoap.org/soap/http"/>
    {operation_tags}
  </wsdl:binding>
  <wsdl:service name="Svc">
    <wsdl:port name="SvcPort" binding="tns:SvcBinding">
      <soap:address location="{endpoint}"/>
    </wsdl:port>
  </wsdl:service>
</wsdl:definitions>
"""


def build_xsd(complex_types: str, target_namespace: str = "urn:common") -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"
    targetNamespace="{target_namespace}" elementFormDefault="qualified">
  {complex_types}
</xs:schema>
"""


def complex_type(name: str, *fields: str, prefix: str = "xs") -> str:
    elements = "".join(
        f'<{prefix}:element name="{field}" type="{prefix}:string"/>' for field in fields
    )
    return (
        f'<{prefix}:complexType name="{name}">'
        f"<{prefix}:sequence>{elements}</{prefix}:sequence>"
        f"</{prefix}:complexType>"
    )


def write_file(path: Path, contents: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return path


class StubResponse:
    def __init__(self, url: str, content: bytes = b"", status_code: int = 200):
        self.url = url
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise HTTPError(f"{self.status_code} for url: {self.url}", response=self)


class StubSession:
    """Serves canned documents by URL; anything else is a 404."""

    def __init__(self, documents: dict[str, str]):
        self.documents = documents
        self.requested: list[str] = []

    def get(self, url: str, allow_redirects: bool = True) -> StubResponse:
        self.requested.append(url)
        if url not in self.documents:
            return StubResponse(url, status_code=404)
        return StubResponse(url, self.documents[url].encode("utf-8"))
