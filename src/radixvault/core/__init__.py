"""Core domain models and parsing for RadixVault."""

from .models import ColorScaleRecord, ResolutionKey, ResourceDomain, TokenBlock
from .scale_parser import ScaleNameKind, extract_blocks

__all__ = [
    "ColorScaleRecord",
    "ResolutionKey",
    "ResourceDomain",
    "ScaleNameKind",
    "TokenBlock",
    "extract_blocks",
]
