import dataclasses

import pytest
from cryptography.hazmat.primitives import hashes

from keystore_core.constraints import (
    BlockMode, Digest, Purpose, from_bits, hash_algorithms, to_bits,
)
from keystore_core.context import AuthorizationContext, require_context
from keystore_core.errors import InvalidArgumentError


def test_flags_are_sets_and_ints():
    p = Purpose.ENCRYPT | Purpose.DECRYPT
    assert Purpose.ENCRYPT in p
    assert Purpose.SIGN not in p
    assert to_bits(p) == int(Purpose.ENCRYPT) | int(Purpose.DECRYPT)


def test_zero_means_no_restriction():
    assert from_bits(BlockMode, 0) == 0
    assert not from_bits(BlockMode, 0)


def test_unknown_bits_are_kept():
    p = from_bits(Purpose, 1 << 20)
    assert isinstance(p, Purpose)
    assert to_bits(p) == 1 << 20


def test_from_bits_rejects_non_ints():
    with pytest.raises(InvalidArgumentError):
        from_bits(Purpose, "1")
    with pytest.raises(InvalidArgumentError):
        from_bits(Purpose, True)


@pytest.mark.parametrize("bits", [-1, -(2**31)])
def test_from_bits_rejects_negative_masks(bits):
    with pytest.raises(InvalidArgumentError, match="negative"):
        from_bits(Purpose, bits)


def test_from_bits_keeps_high_bits():
    assert to_bits(from_bits(Purpose, 2**31)) == 2**31


def test_hash_algorithms():
    algs = hash_algorithms(Digest.SHA256 | Digest.NONE)
    assert len(algs) == 1
    assert isinstance(algs[0], hashes.SHA256)
    assert hash_algorithms(Digest.NONE) == []
    assert hash_algorithms(Digest(0)) == []


def test_require_context():
    ctx = AuthorizationContext()
    assert require_context(ctx) is ctx
    with pytest.raises(InvalidArgumentError):
        require_context(None)


def test_context_is_frozen():
    ctx = AuthorizationContext(label="ui")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.label = "other"
