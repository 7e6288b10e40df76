"""
Utilities Package

Contents:
=========
- security: Password hashing and JWT management

Usage:
======
    from tailblocks.shared.utils.security import SecurityUtils
"""

from tailblocks.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
