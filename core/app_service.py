"""
Facade layer for UI.

Streamlit 側からの呼び出しをこのファイルに集約し、
ロジック実装は core 配下の各モジュールに委譲する。
設定値は呼び出し時に引数で渡し、グローバル状態には依存しない。
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from config import SINGLE_DIRECTORY_LIMIT
from core import config_utils, file_ops
from core.aggregator import (
    AggregateResult,
    aggregate,
    clamp_page_index,
    filter_entries,
    paginate,
)
from core.models import FileEntry


# 設定 ----------------------------------------------------------------------
load_user_config = config_utils.load_user_config
save_user_config = config_utils.save_user_config
resolve_directories = config_utils.resolve_directories


# 最近のファイル ------------------------------------------------------------
def load_recent_files(user_config: Dict[str, Any]) -> AggregateResult:
    """
    設定に従って対象ディレクトリを解決し、集約結果を返す。
    ディレクトリが1件のみの場合は DirectoryScanError を送出し、
    結果を新しい順に SINGLE_DIRECTORY_LIMIT 件までに切り詰める。
    """
    directories: List[Path] = resolve_directories(user_config.get("target_directories"))
    limit = SINGLE_DIRECTORY_LIMIT if len(directories) == 1 else None
    return aggregate(directories, limit=limit)


def get_page(entries: List[FileEntry], keyword: str, page_size: int, page_index: int):
    """
    検索キーワードで絞り込み、ページ番号を補正して1ページ分を返す

    Returns:
        tuple: (ページ内のエントリ, 総ページ数, 補正後のページ番号, 絞り込み後の件数)
    """
    filtered = filter_entries(entries, keyword)
    _, total_pages = paginate(filtered, page_size, 0)
    page_index = clamp_page_index(page_index, total_pages)
    items, _ = paginate(filtered, page_size, page_index)
    return items, total_pages, page_index, len(filtered)


# ファイル操作 --------------------------------------------------------------
open_path = file_ops.open_path
reveal_in_file_manager = file_ops.reveal_in_file_manager


# 表表示 --------------------------------------------------------------------
TABLE_COLUMNS = ["名前", "種類", "サイズ", "作成", "作成日時", "ディレクトリ", "パス"]


def entries_to_dataframe(entries: List[FileEntry], now: Optional[datetime] = None) -> pd.DataFrame:
    """エントリ一覧を表表示用の DataFrame に変換する"""
    if not entries:
        return pd.DataFrame(columns=TABLE_COLUMNS)
    rows = [
        {
            "名前": e.name,
            "種類": "Folder" if e.is_directory else (e.extension or "-"),
            "サイズ": e.size_label,
            "作成": e.age_label(now),
            "作成日時": e.created_at,
            "ディレクトリ": e.source_directory,
            "パス": e.path,
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
