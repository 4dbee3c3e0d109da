"""
File/OS related operations.
ファイルを既定アプリで開く・ファイルマネージャで表示する処理を提供する。
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List

from core.logger import get_logger

logger = get_logger(__name__)


def _open_command(target: Path, reveal: bool = False) -> List[str]:
    """プラットフォームごとの起動コマンドを組み立てる"""
    if sys.platform == "darwin":
        return ["open", "-R", str(target)] if reveal else ["open", str(target)]
    # macOS 以外は親ディレクトリを開いて代用
    if reveal:
        target = target.parent
    return ["xdg-open", str(target)]


def _launch(target: Path, reveal: bool) -> None:
    if sys.platform.startswith("win"):
        os.startfile(str(target.parent if reveal else target))  # type: ignore[attr-defined]
        return
    subprocess.Popen(
        _open_command(target, reveal=reveal),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


def _run(path: str, operation: str, reveal: bool) -> Dict[str, str]:
    target = Path(path)
    if not target.exists():
        logger.warning("operation=%s path=%s reason=file_not_found", operation, path)
        return {'status': 'error', 'message': f'ファイルが見つかりません: {path}'}

    try:
        _launch(target, reveal)
    except OSError as e:
        logger.warning("operation=%s path=%s reason=launch_error error=%s", operation, path, e)
        return {'status': 'error', 'message': f'起動に失敗しました: {e}'}

    logger.info("operation=%s path=%s", operation, path)
    if reveal:
        return {'status': 'success', 'message': f'{target.name} をファイルマネージャで表示しました'}
    return {'status': 'success', 'message': f'{target.name} を開きました'}


def open_path(path: str) -> Dict[str, str]:
    """
    既定のアプリケーションでファイル（フォルダ）を開く

    Returns:
        Dict: 実行結果 {'status': 'success'|'error', 'message': '...'}
    """
    return _run(path, "open", reveal=False)


def reveal_in_file_manager(path: str) -> Dict[str, str]:
    """
    ファイルマネージャ（Finder）で表示する

    Returns:
        Dict: 実行結果 {'status': 'success'|'error', 'message': '...'}
    """
    return _run(path, "reveal", reveal=True)
