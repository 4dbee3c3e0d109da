"""
RecentBox - ファイル行表示コンポーネント
アイコン・名前・経過時間とアクションボタンを1行で表示する
"""

from __future__ import annotations

from datetime import datetime
from html import escape
from typing import Callable, Optional

import streamlit as st

from core.models import FileEntry


def _render_title(entry: FileEntry, now: Optional[datetime]) -> None:
    subtitle = "Folder" if entry.is_directory else entry.size_label
    st.markdown(
        f"{entry.icon} **{escape(entry.name)}** "
        f"<span style='color:#6b7280;font-size:0.85em;'>{escape(subtitle)}</span>",
        unsafe_allow_html=True,
    )
    st.caption(f"{entry.age_label(now)} ・ {entry.source_directory}")


def _render_detail(entry: FileEntry) -> None:
    """画像ファイルのみプレビューを表示"""
    if not entry.is_image:
        return
    with st.expander("🖼️ プレビュー", expanded=False):
        try:
            st.image(entry.path, use_container_width=True)
        except Exception as e:  # 壊れた画像や非対応形式
            st.caption(f"プレビューできません: {e}")


def render_file_row(
    entry: FileEntry,
    *,
    key_prefix: str,
    on_open: Callable[[FileEntry], None],
    on_reveal: Callable[[FileEntry], None],
    now: Optional[datetime] = None,
) -> None:
    """
    ファイル1件を描画する。

    Args:
        entry: 表示するエントリ
        key_prefix: Streamlitウィジェット用キーのプレフィックス
        on_open: 「開く」押下時のコールバック
        on_reveal: 「表示」押下時のコールバック
        now: 相対時間の基準時刻
    """
    with st.container(border=True):
        col_info, col_open, col_reveal = st.columns([6, 1, 1], gap="small")

        with col_info:
            _render_title(entry, now)

        with col_open:
            if st.button("開く", key=f"{key_prefix}_open_{entry.path}", use_container_width=True):
                on_open(entry)

        with col_reveal:
            if st.button("表示", key=f"{key_prefix}_reveal_{entry.path}", use_container_width=True,
                         help="Finderで表示"):
                on_reveal(entry)

        # st.code はコピーボタン付きで描画される
        with st.expander("📋 パス / ファイル名をコピー", expanded=False):
            st.code(entry.path, language=None)
            st.code(entry.name, language=None)

        _render_detail(entry)
