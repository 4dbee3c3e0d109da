"""
Config utilities.
ユーザー設定の読書きと、対象ディレクトリ文字列の解決をここに集約する。
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Optional

from config import PROJECT_ROOT, DEFAULT_TARGET_DIRECTORY, DEFAULT_PAGE_SIZE
from core.logger import get_logger

logger = get_logger(__name__)

CONFIG_PATH = PROJECT_ROOT / "data" / "user_config.json"

VIEW_MODES = ["list", "table"]


def _default_config() -> Dict[str, Any]:
    return {
        "target_directories": DEFAULT_TARGET_DIRECTORY,
        "page_size": DEFAULT_PAGE_SIZE,
        "view_mode": "list",
    }


def load_user_config() -> Dict[str, Any]:
    """
    設定ファイルを読み込み、デフォルト値とマージして返す。
    存在しない場合はデフォルトを返す。
    """
    config = _default_config()

    if CONFIG_PATH.exists():
        try:
            file_config = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
            if isinstance(file_config, dict):
                config.update(file_config)
        except (OSError, ValueError) as e:
            # 読み込み失敗時はデフォルトで継続
            logger.warning("operation=load_config path=%s error=%s", CONFIG_PATH, e)

    # target_directories は文字列に揃える（リスト形式の旧設定も受け付ける）
    target = config.get("target_directories")
    if isinstance(target, (list, tuple)):
        target = ",".join(str(p) for p in target)
    config["target_directories"] = target if isinstance(target, str) else DEFAULT_TARGET_DIRECTORY

    # page_size フォールバック
    try:
        page_size = int(config.get("page_size", DEFAULT_PAGE_SIZE))
    except (TypeError, ValueError):
        page_size = DEFAULT_PAGE_SIZE
    config["page_size"] = page_size if page_size > 0 else DEFAULT_PAGE_SIZE

    # view_mode フォールバック
    if config.get("view_mode") not in VIEW_MODES:
        config["view_mode"] = "list"

    return config


def save_user_config(config: Dict[str, Any]) -> None:
    """
    設定を JSON で保存する。
    """
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(config, ensure_ascii=False, indent=2), encoding="utf-8")


def expand_home(segment: str) -> str:
    """
    先頭の '~' のみをホームディレクトリに展開する

    展開例:
    - "~"           -> "/Users/me"
    - "~/Downloads" -> "/Users/me/Downloads"
    - "/data/~/x"   -> "/data/~/x"（先頭以外は展開しない）
    - "~other"      -> "~other"（他ユーザー指定は非対応）
    """
    if segment == "~":
        return str(Path.home())
    if segment.startswith("~/"):
        return str(Path.home() / segment[2:])
    return segment


def resolve_directories(raw: Optional[str]) -> List[Path]:
    """
    カンマ区切りのディレクトリ指定を絶対パスのリストに変換する。
    重複除去・存在確認は行わない（存在確認はスキャナ側）。

    Args:
        raw: 設定文字列（例: "~/Downloads, ~/Desktop"）

    Returns:
        List[Path]: 指定順の絶対パス。空の場合はデフォルトディレクトリのみ
    """
    segments = [s.strip() for s in (raw or "").split(",")]
    segments = [s for s in segments if s]
    if not segments:
        segments = [DEFAULT_TARGET_DIRECTORY]

    return [Path(expand_home(s)).absolute() for s in segments]
