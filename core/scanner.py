"""
RecentBox - ファイルスキャン機能
ディレクトリ直下のエントリを列挙し、メタ情報付きの FileEntry を生成する
"""

import os
import stat
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Union

from core.logger import get_logger
from core.models import FileEntry

logger = get_logger(__name__)

PathLike = Union[str, Path]


class DirectoryScanError(Exception):
    """ディレクトリ単位のスキャン失敗（基底クラス）"""

    def __init__(self, directory: PathLike, message: str):
        super().__init__(message)
        self.directory = str(directory)
        self.message = message


class DirectoryNotFoundError(DirectoryScanError):
    """ディレクトリが存在しない"""

    def __init__(self, directory: PathLike):
        super().__init__(directory, f"Directory does not exist: {directory}")


class DirectoryPermissionError(DirectoryScanError):
    """ディレクトリは存在するが読み取り権限がない"""

    def __init__(self, directory: PathLike):
        super().__init__(
            directory,
            f"Permission denied: Cannot access {directory}. "
            "Please grant Full Disk Access in System Settings > Privacy & Security > Full Disk Access, "
            "or choose a different directory in preferences.",
        )


class DirectoryAccessError(DirectoryScanError):
    """その他のアクセス失敗"""

    def __init__(self, directory: PathLike, reason: str = ""):
        message = f"Cannot access directory: {directory}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(directory, message)


def file_created_at(stat_result) -> datetime:
    """
    作成日時を取得する。作成日時を持たないプラットフォームでは更新日時で代用する。

    Args:
        stat_result: os.stat_result

    Returns:
        datetime: 作成日時（ローカル時刻）
    """
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is None:
        birthtime = stat_result.st_mtime
    return datetime.fromtimestamp(birthtime)


def is_hidden(name: str) -> bool:
    return name.startswith('.')


def probe_directory(directory: Path) -> None:
    """
    一覧取得の前に読み取り可否を確認し、失敗理由を分類して送出する

    Raises:
        DirectoryNotFoundError: 存在しない
        DirectoryPermissionError: 読み取り権限がない
        DirectoryAccessError: ディレクトリでない、またはその他のエラー
    """
    try:
        if not directory.is_dir():
            if directory.exists():
                raise DirectoryAccessError(directory, "not a directory")
            raise DirectoryNotFoundError(directory)
    except PermissionError:
        raise DirectoryPermissionError(directory)
    except OSError as e:
        raise DirectoryAccessError(directory, str(e))

    if not os.access(directory, os.R_OK | os.X_OK):
        raise DirectoryPermissionError(directory)


def _list_names(directory: Path) -> List[str]:
    """ディレクトリ直下の名前一覧を取得（OSError を分類して送出）"""
    try:
        return os.listdir(directory)
    except FileNotFoundError:
        raise DirectoryNotFoundError(directory)
    except PermissionError:
        raise DirectoryPermissionError(directory)
    except OSError as e:
        raise DirectoryAccessError(directory, str(e))


def iter_directory_entries(directory: Path, names: List[str]) -> Iterator[FileEntry]:
    """
    隠しファイルを除いたエントリを順に生成する。
    stat に失敗したエントリ（リンク切れ等）はログに記録してスキップする。

    Args:
        directory: 検出元ディレクトリ
        names: os.listdir の結果

    Yields:
        FileEntry: 読み取りに成功したエントリ
    """
    for name in names:
        if is_hidden(name):
            continue

        file_path = directory / name
        try:
            # シンボリックリンクは辿る
            file_stat = file_path.stat()
        except OSError as e:
            logger.warning(
                "operation=scan path=%s reason=stat_error error=%s", file_path, e
            )
            continue

        is_directory = stat.S_ISDIR(file_stat.st_mode)
        yield FileEntry(
            name=name,
            path=str(file_path),
            created_at=file_created_at(file_stat),
            size_bytes=0 if is_directory else file_stat.st_size,
            is_directory=is_directory,
            source_directory=str(directory),
        )


def scan_directory(directory: PathLike) -> List[FileEntry]:
    """
    ディレクトリをスキャンして FileEntry のリストを返す（並び順は未定義）

    Args:
        directory: スキャン対象ディレクトリ（絶対パス）

    Returns:
        List[FileEntry]: 読み取りに成功したエントリ。空ディレクトリなら空リスト

    Raises:
        DirectoryScanError: ディレクトリ単位の失敗
    """
    directory = Path(directory)
    probe_directory(directory)
    names = _list_names(directory)
    entries = list(iter_directory_entries(directory, names))
    logger.debug(
        "operation=scan directory=%s listed=%d entries=%d", directory, len(names), len(entries)
    )
    return entries
