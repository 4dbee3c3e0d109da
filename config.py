"""
RecentBox - 設定ファイル
アプリケーション全体の設定を管理
"""

from pathlib import Path

# プロジェクトルートディレクトリ
PROJECT_ROOT = Path(__file__).parent

# 対象ディレクトリ（未設定時のデフォルト、カンマ区切りで複数指定可）
DEFAULT_TARGET_DIRECTORY = "~/Downloads"

# 1ページあたりの表示件数
DEFAULT_PAGE_SIZE = 20
PAGE_SIZE_OPTIONS = [10, 20, 50]

# 単一ディレクトリモードで返す最大件数
SINGLE_DIRECTORY_LIMIT = 20

# プレビュー対象の画像拡張子
IMAGE_EXTENSIONS = ['.png', '.jpg', '.jpeg', '.gif', '.svg', '.webp', '.bmp', '.ico', '.tiff']

# 拡張子ごとのアイコン
FOLDER_ICON = "📁"
DEFAULT_FILE_ICON = "📄"
FILE_ICON_MAP = {
    **{ext: "🖼️" for ext in IMAGE_EXTENSIONS},
    '.pdf': "📄",
    '.doc': "📝",
    '.docx': "📝",
    '.txt': "📝",
    '.md': "📝",
    '.js': "💻",
    '.ts': "💻",
    '.jsx': "💻",
    '.tsx': "💻",
    '.json': "💻",
    '.html': "🌐",
    '.css': "🎨",
    '.mp4': "🎬",
    '.mov': "🎬",
    '.avi': "🎬",
    '.mp3': "🎵",
    '.wav': "🎵",
    '.zip': "📦",
    '.tar': "📦",
    '.gz': "📦",
}

# フルディスクアクセスの案内ページ（macOS）
FULL_DISK_ACCESS_HELP_URL = (
    "https://support.apple.com/guide/mac-help/"
    "control-access-to-files-and-folders-on-mac-mchld5a35146/mac"
)

# ログファイル
LOG_FILE = PROJECT_ROOT / "data" / "recentbox.log"
