"""
共通テストフィクスチャ

設定ファイル・ホームディレクトリ・ログ出力先の差し替えをここで一元管理し、
実環境のユーザー設定やプロジェクト内のログを書き換えないようにする。
"""

import os
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

import config

# ログ出力先をプロジェクト外の一時ディレクトリへ差し替える（core の import より前に行うこと）
config.LOG_FILE = Path(tempfile.mkdtemp(prefix="recentbox-test-logs-")) / "recentbox.log"

import core.config_utils as config_utils  # noqa: E402
import core.scanner as scanner  # noqa: E402


@pytest.fixture
def tmp_config(tmp_path, monkeypatch):
    """ユーザー設定ファイルを一時パスに差し替える"""
    config_path = tmp_path / "data" / "user_config.json"
    monkeypatch.setattr(config_utils, "CONFIG_PATH", config_path)
    return config_path


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """HOME を一時ディレクトリに差し替える"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def make_file():
    """
    ファイルを作成し、必要なら更新日時を設定する

    Usage:
        path = make_file(directory, "a.txt", created_at=datetime(2026, 1, 1))
    """
    def _make(directory, name, created_at=None, content=b"dummy"):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(content)
        if created_at is not None:
            ts = created_at.timestamp()
            os.utime(path, (ts, ts))
        return path
    return _make


@pytest.fixture
def deny_access(monkeypatch):
    """
    指定ディレクトリの読み取り権限チェックを失敗させる。
    root 権限で実行しても権限エラーを再現できるよう os.access を差し替える。
    """
    denied = set()
    real_access = os.access

    def fake_access(path, mode, *args, **kwargs):
        if str(path) in denied:
            return False
        return real_access(path, mode, *args, **kwargs)

    monkeypatch.setattr(scanner.os, "access", fake_access)

    def _deny(path):
        denied.add(str(path))
    return _deny


@pytest.fixture
def base_time():
    return datetime(2026, 10, 19, 12, 0, 0)
