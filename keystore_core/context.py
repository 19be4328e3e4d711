# keystore_core/context.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class AuthorizationContext:
    """
    Opaque handle to the platform layer that owns interactive unlock prompts.

    Only its presence is checked today; it is reserved for asking the user
    to unlock or initialize the key store.
    """
    label: Optional[str] = None


def require_context(context: Optional[AuthorizationContext]) -> AuthorizationContext:
    if context is None:
        raise InvalidArgumentError("context must not be None")
    return context
