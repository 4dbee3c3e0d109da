from __future__ import annotations

from datetime import datetime

import streamlit as st

from config import FULL_DISK_ACCESS_HELP_URL
from core import app_service
from core.aggregator import AggregateResult
from core.models import FileEntry
from core.scanner import DirectoryPermissionError, DirectoryScanError
from ui.components.file_row import render_file_row


def _handle_open(entry: FileEntry) -> None:
    result = app_service.open_path(entry.path)
    if result.get("status") == "success":
        st.toast(result.get("message", "開きました"))
    else:
        st.error(result.get("message", "開けませんでした"))


def _handle_reveal(entry: FileEntry) -> None:
    result = app_service.reveal_in_file_manager(entry.path)
    if result.get("status") == "success":
        st.toast(result.get("message", "表示しました"))
    else:
        st.error(result.get("message", "表示できませんでした"))


def _render_access_guidance(error: DirectoryScanError) -> None:
    """単一ディレクトリのスキャン失敗時の案内表示"""
    st.error("⚠️ ディレクトリにアクセスできません")
    st.write(error.message)

    if isinstance(error, DirectoryPermissionError):
        st.info(
            "macOS ではアプリごとにファイルへのアクセス権限が管理されています。"
            "「システム設定 > プライバシーとセキュリティ > フルディスクアクセス」で"
            "このアプリを起動しているターミナル（またはPython）を許可してください。"
        )
    st.link_button("❓ フルディスクアクセスの許可方法", FULL_DISK_ACCESS_HELP_URL)
    st.caption("サイドバーの「対象ディレクトリ」から別のディレクトリを指定することもできます。")


def _render_failures(result: AggregateResult) -> None:
    if not result.failures:
        return
    lines = "\n".join(f"- {f.directory}: {f.message}" for f in result.failures)
    st.warning(f"一部のディレクトリを読み込めませんでした:\n\n{lines}")


def _render_pagination(total_pages: int, position: str) -> None:
    """ページネーションUI（上部/下部）"""
    page = st.session_state.recent_page

    col_prev, col_info, col_next = st.columns([1, 3, 1], gap="small")

    with col_prev:
        if st.button("◀ 前へ", use_container_width=True, disabled=page <= 0, key=f"recent_prev_{position}"):
            st.session_state.recent_page = page - 1
            st.rerun()

    with col_info:
        selected = st.selectbox(
            "ページ選択",
            options=list(range(total_pages)),
            index=page,
            format_func=lambda i: f"{i + 1}/{total_pages} ページ目",
            key=f"recent_page_select_{position}_{page}",
            label_visibility="collapsed",
        )
        if selected != page:
            st.session_state.recent_page = selected
            st.rerun()

    with col_next:
        if st.button("次へ ▶", use_container_width=True, disabled=page >= total_pages - 1,
                     key=f"recent_next_{position}"):
            st.session_state.recent_page = page + 1
            st.rerun()


def _render_items(items: list[FileEntry], view_mode: str, now: datetime) -> None:
    if view_mode == "table":
        st.dataframe(
            app_service.entries_to_dataframe(items, now),
            use_container_width=True,
            hide_index=True,
        )
        return

    # 同じパスが複数行に現れても衝突しないよう行番号をキーに含める
    for i, entry in enumerate(items):
        render_file_row(
            entry,
            key_prefix=f"recent_{i}",
            on_open=_handle_open,
            on_reveal=_handle_reveal,
            now=now,
        )


def render_recent_files_tab() -> None:
    """最近のファイル一覧を描画"""
    st.header("🕘 最近のファイル")

    if "recent_page" not in st.session_state:
        st.session_state.recent_page = 0

    config = st.session_state.user_config

    try:
        with st.spinner("ファイルを読み込んでいます..."):
            result = app_service.load_recent_files(config)
    except DirectoryScanError as e:
        _render_access_guidance(e)
        return

    _render_failures(result)

    keyword = st.text_input("検索", placeholder="Search recent files...", key="recent_search")

    items, total_pages, page_index, matched = app_service.get_page(
        result.entries, keyword, config["page_size"], st.session_state.recent_page
    )
    st.session_state.recent_page = page_index

    if not items and keyword:
        st.info(f"「{keyword}」に一致するファイルはありません")
        return

    if not items:
        directories = ", ".join(str(d) for d in app_service.resolve_directories(config["target_directories"]))
        st.info(f"No files found\n\nNo recent files found in {directories}")
        return

    st.caption(f"{matched} 件")
    now = datetime.now()

    _render_pagination(total_pages, position="top")
    _render_items(items, config["view_mode"], now)
    if total_pages > 1:
        _render_pagination(total_pages, position="bottom")
