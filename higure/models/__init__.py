"""
Record types for the content server.

- FileRecord (with its EmbedSettings and Uploader sub-records)
- ShortLinkRecord
- InvisibleAliasRecord
"""

from .records import (
    ZERO_WIDTH_SPACE,
    EmbedSettings,
    Uploader,
    FileRecord,
    ShortLinkRecord,
    InvisibleAliasRecord,
    is_invisible_key,
)

__all__ = [
    'ZERO_WIDTH_SPACE',
    'EmbedSettings',
    'Uploader',
    'FileRecord',
    'ShortLinkRecord',
    'InvisibleAliasRecord',
    'is_invisible_key',
]
