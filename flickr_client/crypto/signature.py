"""
Flickr request signatures.

A signature is the MD5 digest, as lowercase hex, of the shared secret
followed by every parameter name and value concatenated in the order the
call site supplies them. The order is part of the wire contract: the
desktop auth URL signs ``api_key``, ``frob``, ``perms`` in that order,
while REST calls sign their parameters sorted by name.

MD5 is mandated by the remote service for compatibility. It is not a
security choice and must not be swapped for another digest.
"""

import hashlib
from collections.abc import Iterable

from flickr_client.exceptions import SignatureUnavailableError

Parameters = Iterable[tuple[str, str]]


def sign_parameters(shared_secret: str | None, parameters: Parameters) -> str:
    """
    Compute the signature over already-ordered parameters.

    Args:
        shared_secret: Secret paired with the API key.
        parameters: (name, value) pairs in wire order. Never re-ordered here.

    Returns:
        Lowercase hex MD5 digest.

    Raises:
        SignatureUnavailableError: If no shared secret is configured.
    """
    if not shared_secret:
        raise SignatureUnavailableError()

    parts = [shared_secret]
    for name, value in parameters:
        parts.append(name)
        parts.append(value)

    return hashlib.md5("".join(parts).encode("utf-8")).hexdigest()


def sign(shared_secret: str | None, api_key: str, parameters: Parameters = ()) -> str:
    """
    Sign a call whose first parameter is the API key.

    Args:
        shared_secret: Secret paired with the API key.
        api_key: Public API key, signed as ``api_key``.
        parameters: Call-specific (name, value) pairs in declared order.

    Returns:
        Lowercase hex MD5 digest.

    Raises:
        SignatureUnavailableError: If no shared secret is configured.
    """
    return sign_parameters(shared_secret, [("api_key", api_key), *parameters])
