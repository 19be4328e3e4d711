# keystore_core/errors.py

"""
keystore_core.errors
--------------------
Error hierarchy for key-store protection parameters.

- InvalidArgumentError: a caller-supplied value is unacceptable
  (missing authorization context, out-of-range duration, bad config)
- InvalidStateError: an accessor was called for a restriction that
  was never specified
"""


class KeyStoreParameterError(Exception):
    pass


class InvalidArgumentError(KeyStoreParameterError, ValueError):
    pass


class InvalidStateError(KeyStoreParameterError, RuntimeError):
    pass
