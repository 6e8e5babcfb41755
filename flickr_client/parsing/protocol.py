"""
Parsable protocol definition.

Every response type builds itself from an ``XmlCursor``. Loaders collect
field values while walking the element and construct the (immutable)
object only once the element has been fully consumed, so a failed parse
never yields a half-populated object.
"""

from typing import Protocol, Self, runtime_checkable

from flickr_client.parsing.cursor import XmlCursor


@runtime_checkable
class Parsable(Protocol):
    """Protocol for objects that deserialize themselves from a response."""

    @classmethod
    def load(cls, cursor: XmlCursor) -> Self:
        """
        Build an instance from the element under the cursor.

        Args:
            cursor: Cursor positioned on the element's opening tag. Left just
                past the element's closing tag on return.

        Returns:
            The fully populated instance.

        Raises:
            UnexpectedElementError: If the cursor is on a different element.
            UnknownAttributeError: If an unrecognized attribute is found in strict mode.
            FormatError: If an attribute value has the wrong format.
        """
        ...
