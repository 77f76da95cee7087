"Failures raised while loading and resolving service descriptions"


class Wsdl2ModelError(Exception):
    "Base class for all wsdl2model failures"


class MalformedDocument(Wsdl2ModelError):
    """A required structural element is missing, or the document is not
    well-formed XML."""

    def __init__(self, step: str, message: str):
        self.step = step
        super().__init__(f"{step}: {message}")


class UnsupportedDocument(Wsdl2ModelError):
    "No namespace declaration matches a URI the parse depends on"

    def __init__(self, step: str, uri: str):
        self.step = step
        self.uri = uri
        super().__init__(f"{step}: namespace {uri} is not declared")


class RetrievalFailure(Wsdl2ModelError):
    "A document could not be fetched"

    def __init__(self, location: str, reason):
        self.location = location
        super().__init__(f"unable to load {location}: {reason}")


class ImportResolutionFailure(Wsdl2ModelError):
    "An imported schema could not be fetched or parsed"

    def __init__(self, location: str, reason):
        self.location = location
        super().__init__(f"unable to import {location}: {reason}")
