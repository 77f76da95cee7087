"Fetch documents from disk or over HTTP"

from pathlib import Path
from urllib.parse import unquote, urljoin, urlparse
import logging
import os
import re

from requests import Session
from requests.exceptions import RequestException

from wsdl2model.const import MAX_REDIRECTS
from wsdl2model.errors import RetrievalFailure

LOGGER = logging.getLogger(__name__)

REMOTE_SCHEMES = {"http", "https"}


def is_remote(location: str) -> bool:
    return urlparse(location).scheme in REMOTE_SCHEMES


def resolve_location(location: str, base: str) -> str:
    "Make possibly-relative `location` absolute to the directory of `base`"
    # Microsoft WCF likes to put backslashes in some URLs instead of slashes
    location = re.sub(r'\\', '/', location)
    location = re.sub(r'%5[cC]', '/', location)
    if is_remote(location):
        return location
    if is_remote(base) or urlparse(base).scheme == "file":
        return urljoin(base, location)
    return os.path.normpath(os.path.join(os.path.dirname(base), location))


class DocumentLoader:
    """Fetches documents for a parse.

    `max_redirects` applies to the session the loader creates; a session
    passed in is used as configured by the caller.
    """

    def __init__(self, session: Session | None = None,
                 max_redirects: int = MAX_REDIRECTS):
        if session is None:
            session = Session()
            session.max_redirects = max_redirects
        self.session = session

    def fetch(self, location: str) -> bytes:
        """Return the raw content of the document at `location`, an http(s)
        URL, a file:// URL or a filesystem path."""
        LOGGER.info("Loading %s", location)
        try:
            parsed = urlparse(location)
        except ValueError as e:
            raise RetrievalFailure(location, e) from e
        if parsed.scheme in REMOTE_SCHEMES:
            return self.fetch_url(location)
        if parsed.scheme == "file":
            return self.read_file(unquote(parsed.path), location)
        return self.read_file(location, location)

    def fetch_url(self, url: str) -> bytes:
        try:
            response = self.session.get(url, allow_redirects=True)
            response.raise_for_status()
        except RequestException as e:
            raise RetrievalFailure(url, e) from e
        if response.url and response.url != url:
            LOGGER.debug("%s redirected to %s", url, response.url)
        return response.content

    def read_file(self, path: str, location: str) -> bytes:
        # ValueError: the path holds a NUL byte
        try:
            return Path(path).read_bytes()
        except (OSError, ValueError) as e:
            raise RetrievalFailure(location, e) from e
