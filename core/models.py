"""
RecentBox - モデル定義
ファイル情報のデータクラスと表示用の共通ユーティリティを提供
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional
import unicodedata

from config import IMAGE_EXTENSIONS, FILE_ICON_MAP, FOLDER_ICON, DEFAULT_FILE_ICON


@dataclass
class FileEntry:
    """スキャンで見つかったファイル（またはフォルダ）1件"""
    name: str
    path: str  # 絶対パス
    created_at: datetime
    size_bytes: int  # フォルダは常に0
    is_directory: bool
    source_directory: str  # 検出元ディレクトリ

    @property
    def extension(self) -> str:
        """小文字の拡張子（フォルダは空文字）"""
        if self.is_directory:
            return ""
        return Path(self.name).suffix.lower()

    @property
    def kind(self) -> str:
        """アイコン選択用の分類（'directory' または拡張子）"""
        return "directory" if self.is_directory else self.extension

    @property
    def is_image(self) -> bool:
        return not self.is_directory and self.extension in IMAGE_EXTENSIONS

    @property
    def icon(self) -> str:
        if self.is_directory:
            return FOLDER_ICON
        return FILE_ICON_MAP.get(self.extension, DEFAULT_FILE_ICON)

    @property
    def size_label(self) -> str:
        """表示用サイズ（フォルダは '-'）"""
        if self.is_directory:
            return "-"
        return format_file_size(self.size_bytes)

    def age_label(self, now: Optional[datetime] = None) -> str:
        return format_relative_age(self.created_at, now)


def format_file_size(size_bytes: int) -> str:
    """バイト数を B / KB / MB / GB 表記に変換"""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 ** 2:
        return f"{size_bytes / 1024:.1f} KB"
    if size_bytes < 1024 ** 3:
        return f"{size_bytes / 1024 ** 2:.1f} MB"
    return f"{size_bytes / 1024 ** 3:.1f} GB"


def format_relative_age(created_at: datetime, now: Optional[datetime] = None) -> str:
    """
    作成日時を相対表記に変換

    表記例:
    - 59分前まで   -> "N minutes ago"
    - 当日         -> "N hours ago"
    - 1日前        -> "Yesterday"
    - 2〜6日前     -> "N days ago"
    - 7日以上前    -> "YYYY-MM-DD"

    Args:
        created_at: 作成日時
        now: 基準時刻（Noneの場合は現在時刻）

    Returns:
        str: 表示用文字列
    """
    if now is None:
        now = datetime.now()

    # 未来の日時は「0分前」として扱う
    diff_seconds = max(0.0, (now - created_at).total_seconds())
    diff_days = int(diff_seconds // 86400)

    if diff_days == 0:
        diff_hours = int(diff_seconds // 3600)
        if diff_hours == 0:
            return f"{int(diff_seconds // 60)} minutes ago"
        return f"{diff_hours} hours ago"
    if diff_days == 1:
        return "Yesterday"
    if diff_days < 7:
        return f"{diff_days} days ago"
    return created_at.strftime("%Y-%m-%d")


def normalize_text(text: str) -> str:
    """全角半角・大小・カナ差を吸収した簡易正規化"""
    if text is None:
        return ""
    norm = unicodedata.normalize("NFKC", text).lower()
    result_chars = []
    for ch in norm:
        code = ord(ch)
        if 0x30a1 <= code <= 0x30f6:
            result_chars.append(chr(code - 0x60))
        else:
            result_chars.append(ch)
    return "".join(result_chars)
