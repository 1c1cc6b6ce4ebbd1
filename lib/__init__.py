# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Clock helpers, secret hashing, slug and key generation
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import (
    as_utc,
    generate_api_key,
    generate_slug,
    hash_password,
    mask_secret,
    utcnow,
    verify_password,
)

__all__ = [
    "as_utc",
    "generate_api_key",
    "generate_slug",
    "hash_password",
    "mask_secret",
    "utcnow",
    "verify_password",
]
