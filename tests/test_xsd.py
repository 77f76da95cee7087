"""Standalone schema parsing tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.documents import build_xsd, complex_type, write_file
from wsdl2model import xsd
from wsdl2model.errors import MalformedDocument, RetrievalFailure
from wsdl2model.model import ComplexTypeDefinition, FieldDefinition, SchemaAttributes


def test_parses_complex_types_and_attributes() -> None:
    document = xsd.parse(build_xsd(complex_type("Address", "street", "city")))

    assert document.schema_attributes == SchemaAttributes("urn:common", "qualified")
    assert document.complex_types == {
        "Address": ComplexTypeDefinition(
            "Address",
            (FieldDefinition("street", "xs:string"), FieldDefinition("city", "xs:string")),
        )
    }


def test_reads_extension_choice_refs_and_occurrences() -> None:
    text = """<schema xmlns="http://www.w3.org/2001/XMLSchema" xmlns:c="urn:common">
      <complexType name="Customer">
        <complexContent>
          <extension base="c:Party">
            <sequence>
              <element name="email" type="string" minOccurs="0"/>
              <element ref="c:Phone" maxOccurs="unbounded"/>
            </sequence>
          </extension>
        </complexContent>
      </complexType>
      <complexType name="Contact">
        <choice><element name="fax" type="string"/></choice>
      </complexType>
      <complexType><sequence><element name="ignored" type="string"/></sequence></complexType>
    </schema>"""

    types = xsd.parse(text).complex_types

    assert types["Customer"] == ComplexTypeDefinition(
        "Customer",
        (
            FieldDefinition("email", "string", min_occurs="0"),
            FieldDefinition("c:Phone", "c:Phone", max_occurs="unbounded"),
        ),
        base="c:Party",
    )
    assert types["Contact"].fields == (FieldDefinition("fax", "string"),)
    assert list(types) == ["Customer", "Contact"]


def test_root_must_be_a_schema() -> None:
    text = '<wrapper xmlns:xs="http://www.w3.org/2001/XMLSchema"><xs:schema/></wrapper>'

    with pytest.raises(MalformedDocument):
        xsd.parse(text)


def test_not_well_formed_schema_is_malformed() -> None:
    with pytest.raises(MalformedDocument):
        xsd.parse("<xs:schema")


def test_parse_from_file(tmp_path: Path) -> None:
    path = write_file(tmp_path / "common.xsd", build_xsd(complex_type("Address", "street")))

    assert list(xsd.parse_from_file(path).complex_types) == ["Address"]


def test_parse_from_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RetrievalFailure):
        xsd.parse_from_file(tmp_path / "missing.xsd")
