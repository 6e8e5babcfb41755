"""
Request signing for the Flickr API.
"""

from flickr_client.crypto.signature import sign, sign_parameters

__all__ = ["sign", "sign_parameters"]
