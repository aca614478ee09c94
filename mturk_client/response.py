"""
Response wrapper and validity classification for Requester API calls.

Every API reply is an XML document. A call succeeded when each Request
element reports <IsValid>True</IsValid> and no Error element is present;
failures carry an Errors/Error list with Code and Message children.
"""

import functools
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional
from xml.etree.ElementTree import Element, ParseError

import requests
from defusedxml import DefusedXmlException
from defusedxml import ElementTree


class ResponseError(NamedTuple):
    """A single Error entry reported by the API."""

    code: str
    message: str


def _strip_namespaces(root: Element) -> Element:
    for element in root.iter():
        if isinstance(element.tag, str) and '}' in element.tag:
            element.tag = element.tag.split('}', 1)[1]
    return root


@dataclass(frozen=True)
class Response:
    """
    Immutable view of one HTTP round trip with the Requester API.

    Attributes:
        status_code: HTTP status code
        body: Raw response body
        headers: Response headers
        content: Undecoded body bytes, parsed in preference to body so the
            XML declaration decides the encoding
    """

    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict, hash=False)
    content: Optional[bytes] = field(default=None, repr=False)

    @classmethod
    def from_requests(cls, response: requests.Response) -> "Response":
        """Wrap a requests.Response."""
        return cls(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
            content=response.content,
        )

    @property
    def ok(self) -> bool:
        """True if the status code is 2xx."""
        return 200 <= self.status_code < 300

    @functools.cached_property
    def document(self) -> Optional[Element]:
        """Parsed XML body with namespaces removed, or None if not XML."""
        data = self.content if self.content is not None else (self.body or '').encode('utf-8')
        if not data.strip():
            return None
        try:
            root = ElementTree.fromstring(data)
        except (ParseError, DefusedXmlException):
            return None
        return _strip_namespaces(root)

    @property
    def errors(self) -> List[ResponseError]:
        """All Error entries in the document, in document order."""
        if self.document is None:
            return []
        return [
            ResponseError(
                code=(error.findtext('Code') or '').strip(),
                message=(error.findtext('Message') or '').strip(),
            )
            for error in self.document.iter('Error')
        ]

    def is_valid(self) -> bool:
        """
        Check whether the API accepted and processed the request.

        Returns:
            True if the status is 2xx, the body is an XML document with at
            least one Request/IsValid element, every IsValid reads "True"
            and no Error element is present
        """
        if not self.ok or self.document is None:
            return False

        flags = [
            (flag.text or '').strip().lower()
            for request in self.document.iter('Request')
            for flag in request.findall('IsValid')
        ]
        if not flags or any(flag != 'true' for flag in flags):
            return False

        return next(self.document.iter('Error'), None) is None

    def find(self, path: str) -> Optional[Element]:
        """Find the first element matching path anywhere in the document."""
        if self.document is None:
            return None
        if self.document.tag == path:
            return self.document
        return self.document.find(f".//{path}")

    def findtext(self, path: str, default: Optional[str] = None) -> Optional[str]:
        """Text of the first element matching path, or default."""
        element = self.find(path)
        if element is None or element.text is None:
            return default
        return element.text.strip()
