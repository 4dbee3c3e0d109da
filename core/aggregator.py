"""
複数ディレクトリのスキャン結果を集約する。

【失敗時の方針】
- 複数ディレクトリ: 失敗したディレクトリはログに記録して空扱い。例外は送出しない
  （全ディレクトリが失敗した場合も空の結果を返す）
- 単一ディレクトリ: DirectoryScanError をそのまま呼び出し元へ送出する
  （UI側で権限設定の案内を表示するため）

【依存関係】
models.py → scanner.py → aggregator.py → app_service.py → UI
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from core.logger import get_logger
from core.models import FileEntry, normalize_text
from core.scanner import DirectoryScanError, scan_directory

logger = get_logger(__name__)


@dataclass
class SourceFailure:
    """スキャンに失敗したディレクトリと原因"""
    directory: str
    error: DirectoryScanError

    @property
    def message(self) -> str:
        return self.error.message


@dataclass
class AggregateResult:
    """作成日時の新しい順に並んだ集約結果"""
    entries: List[FileEntry] = field(default_factory=list)
    failures: List[SourceFailure] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.entries)

    @property
    def all_failed(self) -> bool:
        return not self.entries and bool(self.failures)

    def total_pages(self, size: int) -> int:
        return total_pages(len(self.entries), size)

    def page(self, size: int, index: int) -> Tuple[List[FileEntry], int]:
        return paginate(self.entries, size, index)


def sort_by_created_desc(entries: Iterable[FileEntry]) -> List[FileEntry]:
    """作成日時の降順（同時刻は元の順序を維持）"""
    return sorted(entries, key=lambda e: e.created_at, reverse=True)


def aggregate(
    directories: Sequence[Union[str, Path]],
    *,
    strict: Optional[bool] = None,
    limit: Optional[int] = None,
) -> AggregateResult:
    """
    各ディレクトリを設定順にスキャンし、1つの時系列に統合する。

    Args:
        directories: スキャン対象ディレクトリ（resolve_directories の結果）
        strict: True のときディレクトリ単位の失敗を送出する。
                None のときはディレクトリが1件の場合のみ送出する。
        limit: 返す最大件数（Noneで全件）

    Returns:
        AggregateResult: 集約結果と失敗一覧

    Raises:
        DirectoryScanError: strict モードでスキャンに失敗した場合
    """
    if strict is None:
        strict = len(directories) == 1

    collected: List[FileEntry] = []
    failures: List[SourceFailure] = []

    for directory in directories:
        try:
            collected.extend(scan_directory(directory))
        except DirectoryScanError as e:
            logger.warning(
                "operation=aggregate directory=%s reason=%s error=%s",
                directory, type(e).__name__, e.message,
            )
            if strict:
                raise
            failures.append(SourceFailure(directory=str(directory), error=e))

    entries = sort_by_created_desc(collected)
    if limit is not None:
        entries = entries[:limit]

    logger.info(
        "operation=aggregate directories=%d entries=%d failures=%d",
        len(directories), len(entries), len(failures),
    )
    return AggregateResult(entries=entries, failures=failures)


def total_pages(total_items: int, size: int) -> int:
    if size < 1:
        raise ValueError(f"page size must be positive: {size}")
    return math.ceil(total_items / size)


def paginate(entries: Sequence[FileEntry], size: int, index: int) -> Tuple[List[FileEntry], int]:
    """
    ページ単位で切り出す。範囲外の index は空リストを返す（補正は呼び出し側）。

    Args:
        entries: 並び替え済みのエントリ
        size: 1ページの件数（1以上）
        index: 0始まりのページ番号

    Returns:
        Tuple[List[FileEntry], int]: (ページ内のエントリ, 総ページ数)
    """
    pages = total_pages(len(entries), size)
    if index < 0 or index >= pages:
        return [], pages
    start = index * size
    return list(entries[start:start + size]), pages


def clamp_page_index(index: int, pages: int) -> int:
    """ページ番号を [0, pages - 1] に補正する"""
    return max(0, min(index, pages - 1))


def filter_entries(entries: Iterable[FileEntry], keyword: str) -> List[FileEntry]:
    """ファイル名の部分一致で絞り込む（全角半角・大小・カナ差を無視）"""
    if not keyword:
        return list(entries)
    key_norm = normalize_text(keyword)
    return [e for e in entries if key_norm in normalize_text(e.name)]
