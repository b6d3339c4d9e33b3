"""RadixVault - cached resolution of Radix UI sources, docs and color tokens."""

__version__ = "0.1.0"
__author__ = "RadixVault Team"
