"""
Authentication-related domain models.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Self

from flickr_client.exceptions import FormatError, MalformedResponseError
from flickr_client.parsing.cursor import XmlCursor


class AuthLevel(StrEnum):
    """Permission levels an application can request."""

    NONE = "none"
    READ = "read"
    WRITE = "write"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: str) -> "AuthLevel":
        """Convert a wire value, raising FormatError if unknown."""
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise FormatError(value, expected="none, read, write or delete") from e


@dataclass(frozen=True, kw_only=True)
class Credentials:
    """
    API key and shared secret identifying the calling application.

    Attributes:
        api_key: Public key sent with every call.
        shared_secret: Private secret used to sign calls. Without it no
            signed operation is possible.
    """

    api_key: str | None = None
    shared_secret: str | None = field(default=None, repr=False)

    @property
    def can_sign(self) -> bool:
        return bool(self.shared_secret)


@dataclass(frozen=True, kw_only=True)
class AuthUser:
    """
    The account an auth token belongs to.

    Attributes:
        user_id: Flickr NSID of the user.
        username: Screen name.
        full_name: Real name, if the user provided one.
    """

    user_id: str = ""
    username: str = ""
    full_name: str = ""

    @classmethod
    def load(cls, cursor: XmlCursor) -> Self:
        cursor.expect("user")

        values: dict[str, str] = {}
        for name, value in cursor.attributes():
            match name:
                case "nsid":
                    values["user_id"] = value
                case "username":
                    values["username"] = value
                case "fullname":
                    values["full_name"] = value
                case _:
                    cursor.unknown_attribute(name, value)

        cursor.skip()
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Auth:
    """
    Result of a successful token exchange or token check.

    Attributes:
        token: Token to send with authenticated calls.
        perms: Permission level granted to the token.
        user: Account the token belongs to.
    """

    token: str
    perms: AuthLevel = AuthLevel.NONE
    user: AuthUser = field(default_factory=AuthUser)

    @classmethod
    def load(cls, cursor: XmlCursor) -> Self:
        cursor.expect("auth")

        for name, value in cursor.attributes():
            cursor.unknown_attribute(name, value)

        token = ""
        perms = AuthLevel.NONE
        user = AuthUser()
        for child in cursor.children():
            match child:
                case "token":
                    token = cursor.read_inner_text()
                case "perms":
                    perms = AuthLevel.parse(cursor.read_inner_text())
                case "user":
                    user = AuthUser.load(cursor)

        if not token:
            msg = "Auth response has no token"
            raise MalformedResponseError(msg)
        return cls(token=token, perms=perms, user=user)
