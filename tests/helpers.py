"""
テスト用ヘルパー
"""

import os

import pytest

from core.models import FileEntry

# Linux など作成日時を持たない環境では更新日時で並び順を制御できる
requires_mtime_fallback = pytest.mark.skipif(
    hasattr(os.stat(os.getcwd()), "st_birthtime"),
    reason="作成日時を os.utime で制御できないプラットフォーム",
)


def make_entry(name, created_at, source="/src", is_directory=False, size_bytes=10):
    """テスト用の FileEntry を生成"""
    return FileEntry(
        name=name,
        path=f"{source}/{name}",
        created_at=created_at,
        size_bytes=0 if is_directory else size_bytes,
        is_directory=is_directory,
        source_directory=source,
    )
