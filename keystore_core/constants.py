# keystore_core/constants.py

SCHEMA_VERSION = "1.0"

# Key-store entry flag: entry must be encrypted at rest.
FLAG_ENCRYPTED = 1

# Authentication, once performed, stays valid for every later use of the key.
UNLIMITED_AUTH_VALIDITY = -1
