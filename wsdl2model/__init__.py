"Extract a normalized service description model from WSDL documents"

__version__ = "0.1"

from wsdl2model.model import ParsedDocument, SoapVersion  # noqa: E402
from wsdl2model.wsdl import parse, parse_from_file, parse_from_url  # noqa: E402

__all__ = [
    "ParsedDocument", "SoapVersion", "parse", "parse_from_file",
    "parse_from_url"]
