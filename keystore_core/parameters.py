"""
keystore_core.parameters
------------------------
Protection parameters for key-store entries.

A KeyStoreParameter is an immutable description of how a key may be used and
stored: whether the entry is encrypted at rest, the validity window, the
allowed purposes, paddings, digests and block modes, and which user
authenticators guard the key. It is produced by KeyStoreParameter.Builder
and handed as-is to the key provisioning subsystem, which does the actual
enforcement.

Example::

    params = (
        KeyStoreParameter.Builder(ctx)
        .set_encryption_required(True)
        .set_purposes(Purpose.SIGN | Purpose.VERIFY)
        .set_digests(Digest.SHA256)
        .build()
    )
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Union

from .constants import FLAG_ENCRYPTED, SCHEMA_VERSION, UNLIMITED_AUTH_VALIDITY
from .constraints import BlockMode, Digest, Padding, Purpose, UserAuthenticator, from_bits
from .context import AuthorizationContext, require_context
from .errors import InvalidArgumentError, InvalidStateError
from .logger import get_logger
from .utils import canonical_json, iso_ts

log = get_logger("keystore_core.parameters")

# set_digests() never called
_UNSET = object()


class ProtectionParameter:
    """Marker for configuration objects accepted by a key store alongside an entry."""


@dataclass(frozen=True)
class KeyStoreParameter(ProtectionParameter):
    flags: int = 0
    key_validity_start: Optional[datetime] = None
    key_validity_for_origination_end: Optional[datetime] = None
    key_validity_for_consumption_end: Optional[datetime] = None
    purposes: Purpose = Purpose(0)
    paddings: Padding = Padding(0)
    digests: Optional[Digest] = None     # None = not specified, Digest(0) = specified as empty
    block_modes: BlockMode = BlockMode(0)
    user_authenticators: UserAuthenticator = UserAuthenticator(0)
    user_authentication_validity_duration_seconds: int = UNLIMITED_AUTH_VALIDITY

    def __post_init__(self):
        seconds = self.user_authentication_validity_duration_seconds
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise InvalidArgumentError(
                "user_authentication_validity_duration_seconds must be an int"
            )
        if seconds < 0 and seconds != UNLIMITED_AUTH_VALIDITY:
            raise InvalidArgumentError(
                "user_authentication_validity_duration_seconds must not be negative "
                f"(got {seconds}; use -1 for unlimited)"
            )

    def is_encryption_required(self) -> bool:
        """True if entries protected by this parameter must be encrypted on disk."""
        return (self.flags & FLAG_ENCRYPTED) != 0

    def is_digests_specified(self) -> bool:
        """True if a digest restriction was set, even an empty one."""
        return self.digests is not None

    def get_digests(self) -> Digest:
        """
        Digests the key is restricted to.

        Raises InvalidStateError if the restriction was never specified;
        check is_digests_specified() first.
        """
        if self.digests is None:
            raise InvalidStateError("Digests not specified")
        return self.digests

    def to_dict(self) -> Dict[str, Any]:
        """Integer bit encodings and ISO timestamps, as consumed by the key store."""
        return {
            "schema_ver": SCHEMA_VERSION,
            "flags": self.flags,
            "encryption_required": self.is_encryption_required(),
            "key_validity_start": iso_ts(self.key_validity_start),
            "key_validity_for_origination_end": iso_ts(self.key_validity_for_origination_end),
            "key_validity_for_consumption_end": iso_ts(self.key_validity_for_consumption_end),
            "purposes": int(self.purposes),
            "paddings": int(self.paddings),
            "digests": None if self.digests is None else int(self.digests),
            "block_modes": int(self.block_modes),
            "user_authenticators": int(self.user_authenticators),
            "user_authentication_validity_duration_seconds":
                self.user_authentication_validity_duration_seconds,
        }

    def to_json(self) -> str:
        return canonical_json(self.to_dict())

    class Builder:
        """
        Mutable accumulator for KeyStoreParameter values.

        Setters return the builder for chaining and never validate; build()
        converts the bitmasks and validates. A builder may be built repeatedly,
        fields are not reset between builds. Not safe for concurrent mutation.
        """

        def __init__(self, context: AuthorizationContext):
            # Context is only checked for presence for now.
            require_context(context)
            self._flags = 0
            self._key_validity_start: Optional[datetime] = None
            self._key_validity_for_origination_end: Optional[datetime] = None
            self._key_validity_for_consumption_end: Optional[datetime] = None
            self._purposes: Union[Purpose, int] = Purpose(0)
            self._paddings: Union[Padding, int] = Padding(0)
            self._digests: Any = _UNSET
            self._block_modes: Union[BlockMode, int] = BlockMode(0)
            self._user_authenticators: Union[UserAuthenticator, int] = UserAuthenticator(0)
            self._user_authentication_validity_duration_seconds = UNLIMITED_AUTH_VALIDITY

        def set_encryption_required(self, required: bool = True) -> "KeyStoreParameter.Builder":
            """
            Require the entry to be encrypted at rest. The platform will then
            insist on a secure lock screen before the key can be created or used.
            """
            if required:
                self._flags |= FLAG_ENCRYPTED
            else:
                self._flags &= ~FLAG_ENCRYPTED
            return self

        def set_key_validity_start(self, start: Optional[datetime]) -> "KeyStoreParameter.Builder":
            """Instant before which the key is not yet valid. None means unbounded."""
            self._key_validity_start = start
            return self

        def set_key_validity_end(self, end: Optional[datetime]) -> "KeyStoreParameter.Builder":
            """Set both the origination and the consumption end to ``end``."""
            self.set_key_validity_for_origination_end(end)
            self.set_key_validity_for_consumption_end(end)
            return self

        def set_key_validity_for_origination_end(
            self, end: Optional[datetime]
        ) -> "KeyStoreParameter.Builder":
            """Instant after which the key can no longer encrypt or sign."""
            self._key_validity_for_origination_end = end
            return self

        def set_key_validity_for_consumption_end(
            self, end: Optional[datetime]
        ) -> "KeyStoreParameter.Builder":
            """Instant after which the key can no longer decrypt or verify."""
            self._key_validity_for_consumption_end = end
            return self

        def set_purposes(self, purposes: Union[Purpose, int]) -> "KeyStoreParameter.Builder":
            """Operations the key may be used for. Meant to be always set; not enforced."""
            self._purposes = purposes
            return self

        def set_paddings(self, paddings: Union[Padding, int]) -> "KeyStoreParameter.Builder":
            self._paddings = paddings
            return self

        def set_digests(self, digests: Union[Digest, int]) -> "KeyStoreParameter.Builder":
            """Digests allowed for signatures and MACs. Marks the restriction as specified."""
            self._digests = digests
            return self

        def set_block_modes(self, block_modes: Union[BlockMode, int]) -> "KeyStoreParameter.Builder":
            self._block_modes = block_modes
            return self

        def set_user_authenticators(
            self, user_authenticators: Union[UserAuthenticator, int]
        ) -> "KeyStoreParameter.Builder":
            """
            Authenticators protecting the key; the key is usable only after the
            user authenticates to one of them. 0 means no authentication needed.
            """
            self._user_authenticators = user_authenticators
            return self

        def set_user_authentication_validity_duration_seconds(
            self, seconds: int
        ) -> "KeyStoreParameter.Builder":
            """
            Seconds the key stays usable after a successful authentication.
            0 requires authentication for every use, -1 never expires.
            """
            self._user_authentication_validity_duration_seconds = seconds
            return self

        def build(self) -> "KeyStoreParameter":
            """
            Freeze the current values into a KeyStoreParameter.

            Raises InvalidArgumentError if a bitmask is not a non-negative int,
            or if the authentication validity duration is neither -1 nor
            non-negative.
            """
            digests = None if self._digests is _UNSET else from_bits(Digest, self._digests)
            params = KeyStoreParameter(
                flags=self._flags,
                key_validity_start=self._key_validity_start,
                key_validity_for_origination_end=self._key_validity_for_origination_end,
                key_validity_for_consumption_end=self._key_validity_for_consumption_end,
                purposes=from_bits(Purpose, self._purposes),
                paddings=from_bits(Padding, self._paddings),
                digests=digests,
                block_modes=from_bits(BlockMode, self._block_modes),
                user_authenticators=from_bits(UserAuthenticator, self._user_authenticators),
                user_authentication_validity_duration_seconds=(
                    self._user_authentication_validity_duration_seconds
                ),
            )
            log.debug(
                "PARAMS BUILT purposes=%d digests=%s auth_validity=%d encrypted=%s",
                int(params.purposes),
                "unspecified" if params.digests is None else int(params.digests),
                params.user_authentication_validity_duration_seconds,
                params.is_encryption_required(),
            )
            return params


Builder = KeyStoreParameter.Builder
