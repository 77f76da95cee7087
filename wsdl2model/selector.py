"""XPath evaluation over documents whose namespace prefixes are only known
after reading their declarations.

A service description may bind any prefix to the WSDL, SOAP or XML Schema
namespaces, including the default (unprefixed) namespace, which XPath cannot
address. Callers resolve a `Prefix` per namespace by URI and hand those to a
`Selector`, which builds the namespace map for every query.
"""

from dataclasses import dataclass

from lxml import etree

from wsdl2model.errors import MalformedDocument

PARSER = etree.XMLParser(resolve_entities=False, remove_comments=True)
# str input is already decoded; its encoding declaration no longer applies
TEXT_PARSER = etree.XMLParser(
    encoding="utf-8", resolve_entities=False, remove_comments=True)


def parse_xml(text, step: str = "document"):
    "Parse `text` (str or bytes) and return the root element"
    parser = PARSER
    if isinstance(text, str):
        text = text.encode("utf-8")
        parser = TEXT_PARSER
    try:
        return etree.fromstring(text, parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedDocument(step, f"not well-formed XML ({e})") from e


def declarations(root) -> list:
    """Every (prefix, uri) namespace declaration beneath `root`, in
    document order. The default namespace has the prefix ''."""
    seen = []
    for element in root.iter(etree.Element):
        for prefix, uri in element.nsmap.items():
            pair = (prefix or "", uri)
            if pair not in seen:
                seen.append(pair)
    return seen


@dataclass(frozen=True)
class Prefix:
    """A prefix as declared in a document, bound to its namespace URI.

    `alias` stands in for the prefix in XPath expressions when the
    namespace is declared as the default namespace.
    """
    name: str
    uri: str
    alias: str

    @property
    def selector(self) -> str:
        return self.name or self.alias

    def qualify(self, local_name: str) -> str:
        return f"{self.selector}:{local_name}"


class Selector:
    "Evaluate XPath expressions against `root` using resolved prefixes"

    def __init__(self, root, *prefixes: Prefix):
        self.root = root
        self.namespaces = {p.selector: p.uri for p in prefixes}

    def nodes(self, path: str, context=None, **variables) -> list:
        if context is None:
            context = self.root
        return context.xpath(path, namespaces=self.namespaces, **variables)

    def exists(self, path: str, context=None, **variables) -> bool:
        return bool(self.nodes(path, context, **variables))

    def string(self, path: str, context=None, **variables) -> str:
        "String value of the first node matching `path`, or ''"
        return str(self.nodes(f"string({path})", context, **variables))
