"""RadixVault Shared Module.

This package contains shared constants, error handling, logging helpers and
models used across RadixVault.
"""

__all__ = ["constants", "errors", "logging", "models"]
