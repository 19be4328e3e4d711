"""
keystore_core.constraints
-------------------------
Typed flag sets for the key usage restrictions a key-store entry may carry:

- Purpose: operations the key may perform
- Padding: padding schemes the key may be used with
- Digest: digests allowed when signing or computing MACs
- BlockMode: block cipher modes the key may be used with
- UserAuthenticator: mechanisms that unlock use of the key

Each type is an ``IntFlag``, so a value is both a set of flags and the plain
integer bit encoding understood by the key store. ``0`` always means
"no restriction". Bits outside the named members are carried through
untouched. Masks must be non-negative.
"""

from __future__ import annotations
from enum import IntFlag
from typing import List, Type, TypeVar, Union
from cryptography.hazmat.primitives import hashes

from .errors import InvalidArgumentError

F = TypeVar("F", bound=IntFlag)


class Purpose(IntFlag):
    ENCRYPT = 1 << 0
    DECRYPT = 1 << 1
    SIGN = 1 << 2
    VERIFY = 1 << 3


class Padding(IntFlag):
    NONE = 1 << 0
    ZERO = 1 << 1
    PKCS7 = 1 << 2


class Digest(IntFlag):
    NONE = 1 << 0
    SHA256 = 1 << 1


class BlockMode(IntFlag):
    ECB = 1 << 0
    CBC = 1 << 1
    CTR = 1 << 2


class UserAuthenticator(IntFlag):
    LOCK_SCREEN = 1 << 0


def from_bits(flag_type: Type[F], bits: Union[int, IntFlag]) -> F:
    """
    Convert a raw bit encoding into ``flag_type`` without altering its value.

    Raises InvalidArgumentError for non-int or negative input; IntFlag would
    otherwise rewrite negative masks into a different positive value.
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise InvalidArgumentError(
            f"{flag_type.__name__} bits must be int, got {type(bits).__name__}"
        )
    if bits < 0:
        raise InvalidArgumentError(f"{flag_type.__name__} bits must not be negative (got {bits})")
    return flag_type(int(bits))


def to_bits(flags: Union[int, IntFlag]) -> int:
    return int(flags)


_HASHES = {
    Digest.SHA256: hashes.SHA256,
}


def hash_algorithms(digests: Digest) -> List[hashes.HashAlgorithm]:
    """
    Map a digest restriction onto ``cryptography`` hash algorithm objects.

    Digest.NONE (raw signing) and unknown bits have no algorithm and are skipped.
    """
    return [factory() for digest, factory in _HASHES.items() if digests & digest]
