"""
RecentBox - 設定サイドバー
対象ディレクトリ・表示件数・表示形式を編集して保存する
"""

from __future__ import annotations

import streamlit as st

from config import PAGE_SIZE_OPTIONS, DEFAULT_PAGE_SIZE
from core import app_service

VIEW_MODE_LABELS = {"list": "リスト", "table": "表"}


def render_preferences_sidebar() -> None:
    """サイドバーに設定フォームを描画し、保存時にセッションの設定を更新する"""
    config = st.session_state.user_config

    with st.sidebar:
        st.header("⚙️ 設定")
        with st.form("preferences_form"):
            target = st.text_input(
                "対象ディレクトリ",
                value=config["target_directories"],
                help="カンマ区切りで複数指定できます（例: ~/Downloads, ~/Desktop）",
            )
            page_size = st.selectbox(
                "表示件数",
                options=PAGE_SIZE_OPTIONS,
                index=PAGE_SIZE_OPTIONS.index(config["page_size"])
                if config["page_size"] in PAGE_SIZE_OPTIONS
                else PAGE_SIZE_OPTIONS.index(DEFAULT_PAGE_SIZE),
            )
            view_mode = st.radio(
                "表示形式",
                options=list(VIEW_MODE_LABELS),
                format_func=VIEW_MODE_LABELS.get,
                index=list(VIEW_MODE_LABELS).index(config["view_mode"]),
                horizontal=True,
            )
            submitted = st.form_submit_button("保存", use_container_width=True)

        if submitted:
            new_config = {
                **config,
                "target_directories": target,
                "page_size": page_size,
                "view_mode": view_mode,
            }
            try:
                app_service.save_user_config(new_config)
            except OSError as e:
                st.error(f"設定の保存に失敗しました: {e}")
                return
            st.session_state.user_config = new_config
            st.session_state.recent_page = 0
            st.success("設定を保存しました")

        st.caption("解決されたディレクトリ:")
        for directory in app_service.resolve_directories(st.session_state.user_config["target_directories"]):
            st.caption(f"・{directory}")
