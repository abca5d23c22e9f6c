"""
Security helpers: bcrypt password hashes, HS256 tokens, share hashes.

    from brainvault.shared.utils import SecurityUtils

    SecurityUtils.generate_share_hash(10)   # e.g. "aZ3k9QwP0x"
"""

from brainvault.shared.utils.security import SecurityUtils

__all__ = ["SecurityUtils"]
