"""
RecentBox - メインアプリケーション（UI層）
Streamlitベースの最近のファイル一覧
"""

import streamlit as st

from core import app_service
from ui.preferences import render_preferences_sidebar
from ui.recent_files_tab import render_recent_files_tab


# ページ設定
st.set_page_config(
    page_title="RecentBox - 最近のファイル",
    page_icon="🕘",
    layout="wide",
    initial_sidebar_state="expanded"
)


def init_session_state():
    """セッション状態の初期化"""
    if "user_config" not in st.session_state:
        st.session_state.user_config = app_service.load_user_config()
    if "recent_page" not in st.session_state:
        st.session_state.recent_page = 0


def main():
    init_session_state()
    render_preferences_sidebar()
    render_recent_files_tab()


if __name__ == "__main__":
    main()
