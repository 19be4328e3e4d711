"""
Keystore Core Package
=====================
Protection parameters for entries of a secure key store.

Provides:
- KeyStoreParameter and its Builder (validated, immutable usage constraints)
- Typed flag sets for purposes, paddings, digests, block modes, authenticators
- AuthorizationContext handle and the package error hierarchy
"""

from .constraints import BlockMode, Digest, Padding, Purpose, UserAuthenticator
from .context import AuthorizationContext
from .errors import InvalidArgumentError, InvalidStateError, KeyStoreParameterError
from .parameters import Builder, KeyStoreParameter, ProtectionParameter

__all__ = [
    "AuthorizationContext",
    "BlockMode",
    "Builder",
    "Digest",
    "InvalidArgumentError",
    "InvalidStateError",
    "KeyStoreParameter",
    "KeyStoreParameterError",
    "Padding",
    "ProtectionParameter",
    "Purpose",
    "UserAuthenticator",
]
