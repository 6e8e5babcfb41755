"""
Forward-only XML cursor over a streamed Flickr response.

The cursor walks the start/end events produced by ``XMLPullParser``. Loaders
receive it positioned on their opening tag and must leave it just past their
closing tag, ready for the next sibling. A cursor is not reentrant and must
not be shared between concurrent parses.
"""

import xml.etree.ElementTree as ET
from collections import deque
from collections.abc import Iterator
from enum import StrEnum

import structlog

from flickr_client.exceptions import (
    MalformedResponseError,
    UnexpectedElementError,
    UnknownAttributeError,
)

logger = structlog.get_logger(__name__)

_Event = tuple[str, ET.Element]


class XmlEvent(StrEnum):
    """Kind of node the cursor is positioned on."""

    START = "start"
    END = "end"


def local_name(name: str) -> str:
    """Strip a ``{namespace}`` prefix from a tag or attribute name."""
    if name.startswith("{"):
        return name.rpartition("}")[2]
    return name


def _iter_events(source: bytes | str, chunk_size: int) -> Iterator[_Event]:
    parser = ET.XMLPullParser(events=(XmlEvent.START.value, XmlEvent.END.value))
    for offset in range(0, len(source), chunk_size):
        parser.feed(source[offset : offset + chunk_size])
        yield from parser.read_events()
    parser.close()
    yield from parser.read_events()


class XmlCursor:
    """
    Streaming cursor positioned on one element start or end at a time.

    Args:
        source: Raw response document.
        strict: Raise on unknown attributes instead of logging and ignoring them.
        chunk_size: Number of bytes fed to the parser at a time.

    Raises:
        MalformedResponseError: If the document is empty or not well-formed.
    """

    def __init__(
        self,
        source: bytes | str,
        *,
        strict: bool = True,
        chunk_size: int = 64 * 1024,
    ) -> None:
        self.strict = strict
        self._events = _iter_events(source, chunk_size)
        self._pending: deque[_Event] = deque()
        self._event: str | None = None
        self._element: ET.Element | None = None
        self._position = 0

        if not self.read():
            msg = "Empty response document"
            raise MalformedResponseError(msg)

    @property
    def eof(self) -> bool:
        """True once every event has been consumed."""
        return self._event is None

    @property
    def is_start(self) -> bool:
        return self._event == XmlEvent.START

    @property
    def is_end(self) -> bool:
        return self._event == XmlEvent.END

    @property
    def local_name(self) -> str | None:
        """Local name of the current element, or None at end of document."""
        if self._element is None:
            return None
        return local_name(self._element.tag)

    @property
    def position(self) -> int:
        """Number of events consumed so far."""
        return self._position

    @property
    def is_empty_element(self) -> bool:
        """True if the current start tag has neither text nor children."""
        if not self.is_start:
            return False
        upcoming = self._peek()
        return (
            upcoming is not None
            and upcoming[0] == XmlEvent.END
            and upcoming[1] is self._element
            and not self._element.text
        )

    def read(self) -> bool:
        """
        Advance to the next start or end event.

        Returns:
            False once the end of the document is reached.
        """
        event = self._pending.popleft() if self._pending else self._pull()
        self._position += 1
        if event is None:
            self._event = None
            self._element = None
            return False
        self._event, self._element = event
        return True

    def expect(self, name: str) -> None:
        """
        Check that the cursor sits on the opening tag of ``name``.

        Raises:
            UnexpectedElementError: If positioned anywhere else.
        """
        if not self.is_start or self.local_name != name:
            raise UnexpectedElementError(self.local_name, name)

    def attributes(self) -> list[tuple[str, str]]:
        """Attributes of the current start tag, in document order."""
        if not self.is_start:
            return []
        return [(local_name(k), v) for k, v in self._element.attrib.items()]

    def unknown_attribute(self, name: str, value: str) -> None:
        """
        Report an attribute the current loader does not recognize.

        Raises:
            UnknownAttributeError: In strict mode.
        """
        if self.strict:
            raise UnknownAttributeError(name, value, element=self.local_name)
        logger.warning(
            "Ignoring unknown attribute",
            element=self.local_name,
            attribute=name,
            value=value,
        )

    def children(self) -> Iterator[str]:
        """
        Iterate the child elements of the current element.

        Yields the local name of each child with the cursor on its opening
        tag. The caller either consumes the child completely (``load``,
        ``read_inner_text`` or ``skip``) or leaves it untouched, in which
        case it is skipped. When iteration finishes the cursor sits just
        past the parent's closing tag. Works for empty elements too.

        The iterator must be exhausted; breaking out early leaves the cursor
        inside the parent.
        """
        parent = self._require_start()
        if self.is_empty_element:
            self.skip()
            return

        self.read()

        while not (self._event == XmlEvent.END and self._element is parent):
            if self._event is None:
                msg = "Unexpected end of document"
                raise MalformedResponseError(msg, element=local_name(parent.tag))
            if self._event == XmlEvent.START:
                position = self._position
                yield local_name(self._element.tag)
                if self._position == position:
                    self.skip()
            else:
                self.read()

        self.read()

    def read_inner_text(self) -> str:
        """
        Read everything inside the current element as opaque text.

        Child markup, if any, is returned serialized. The cursor ends up just
        past the element's closing tag.
        """
        element = self._require_start()
        self._advance_to_end(element)

        inner = (element.text or "") + "".join(
            ET.tostring(child, encoding="unicode") for child in element
        )
        self.read()
        return inner

    def skip(self) -> None:
        """Move past the current element, including all of its content."""
        if self.is_start:
            self._advance_to_end(self._element)
        if not self.eof:
            self.read()

    def _require_start(self) -> ET.Element:
        if not self.is_start:
            raise UnexpectedElementError(self.local_name, "element start")
        return self._element

    def _advance_to_end(self, element: ET.Element) -> None:
        while not (self._event == XmlEvent.END and self._element is element):
            if not self.read():
                msg = "Unexpected end of document"
                raise MalformedResponseError(msg, element=local_name(element.tag))

    def _peek(self) -> _Event | None:
        if not self._pending:
            event = self._pull()
            if event is None:
                return None
            self._pending.append(event)
        return self._pending[0]

    def _pull(self) -> _Event | None:
        try:
            return next(self._events, None)
        except ET.ParseError as e:
            msg = "Response is not well-formed XML"
            raise MalformedResponseError(msg, detail=str(e)) from e
