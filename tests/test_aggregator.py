"""
RecentBox - 集約・ページングのテスト
"""

from datetime import timedelta

import pytest

import core.aggregator as aggregator
from core.aggregator import (
    AggregateResult,
    aggregate,
    clamp_page_index,
    filter_entries,
    paginate,
)
from core.scanner import DirectoryNotFoundError, DirectoryPermissionError
from helpers import make_entry, requires_mtime_fallback


@pytest.fixture
def fake_sources(monkeypatch):
    """
    scan_directory をディレクトリ名→結果（リストまたは例外）の辞書で差し替える
    """
    sources = {}

    def fake_scan(directory):
        result = sources[str(directory)]
        if isinstance(result, Exception):
            raise result
        return list(result)

    monkeypatch.setattr(aggregator, "scan_directory", fake_scan)
    return sources


def test_aggregate_sorts_across_directories_newest_first(fake_sources, base_time):
    fake_sources["/a"] = [
        make_entry("a_old", base_time - timedelta(hours=5), source="/a"),
        make_entry("a_new", base_time, source="/a"),
    ]
    fake_sources["/b"] = [
        make_entry("b_mid", base_time - timedelta(hours=1), source="/b"),
    ]

    result = aggregate(["/a", "/b"])

    assert [e.name for e in result] == ["a_new", "b_mid", "a_old"]
    times = [e.created_at for e in result]
    assert times == sorted(times, reverse=True)
    assert result.failures == []


def test_aggregate_keeps_configured_order_for_ties(fake_sources, base_time):
    """同時刻のエントリはディレクトリ設定順・スキャン順を維持する"""
    fake_sources["/a"] = [make_entry("a1", base_time, "/a"), make_entry("a2", base_time, "/a")]
    fake_sources["/b"] = [make_entry("b1", base_time, "/b")]

    result = aggregate(["/a", "/b"])

    assert [e.name for e in result] == ["a1", "a2", "b1"]


def test_aggregate_skips_failed_directory(fake_sources, base_time):
    """失敗したディレクトリは空扱いで、他のディレクトリは集約される"""
    fake_sources["/missing"] = DirectoryNotFoundError("/missing")
    fake_sources["/ok"] = [make_entry("ok", base_time, "/ok")]

    result = aggregate(["/missing", "/ok"])

    assert [e.name for e in result] == ["ok"]
    assert len(result.failures) == 1
    assert result.failures[0].directory == "/missing"
    assert isinstance(result.failures[0].error, DirectoryNotFoundError)
    assert result.all_failed is False


def test_aggregate_all_directories_failing_returns_empty(fake_sources):
    """複数ディレクトリがすべて失敗しても例外は送出せず空の結果を返す"""
    fake_sources["/x"] = DirectoryNotFoundError("/x")
    fake_sources["/y"] = DirectoryPermissionError("/y")

    result = aggregate(["/x", "/y"])

    assert list(result) == []
    assert len(result) == 0
    assert [f.directory for f in result.failures] == ["/x", "/y"]
    assert result.all_failed is True


def test_aggregate_single_directory_propagates_error(fake_sources):
    """単一ディレクトリモードではエラーを呼び出し元へ送出する"""
    fake_sources["/only"] = DirectoryPermissionError("/only")

    with pytest.raises(DirectoryPermissionError):
        aggregate(["/only"])


def test_aggregate_single_directory_non_strict_degrades(fake_sources):
    fake_sources["/only"] = DirectoryNotFoundError("/only")

    result = aggregate(["/only"], strict=False)

    assert result.all_failed is True


def test_aggregate_strict_multi_directory_raises(fake_sources, base_time):
    fake_sources["/ok"] = [make_entry("ok", base_time, "/ok")]
    fake_sources["/missing"] = DirectoryNotFoundError("/missing")

    with pytest.raises(DirectoryNotFoundError):
        aggregate(["/ok", "/missing"], strict=True)


def test_aggregate_limit_keeps_most_recent(fake_sources, base_time):
    fake_sources["/a"] = [make_entry(f"f{i}", base_time + timedelta(minutes=i), "/a") for i in range(30)]

    result = aggregate(["/a"], limit=20)

    assert len(result) == 20
    assert result.entries[0].name == "f29"
    assert result.entries[-1].name == "f10"


def test_aggregate_with_unreadable_directory_on_disk(tmp_path, make_file, deny_access):
    """実ファイルシステム: 読めないディレクトリと読めるディレクトリの混在"""
    readable = tmp_path / "readable"
    unreadable = tmp_path / "unreadable"
    make_file(readable, "a.txt")
    make_file(readable, "b.txt")
    make_file(unreadable, "secret.txt")
    deny_access(unreadable)

    result = aggregate([unreadable, readable])

    assert sorted(e.name for e in result) == ["a.txt", "b.txt"]
    assert all(e.source_directory == str(readable) for e in result)
    assert isinstance(result.failures[0].error, DirectoryPermissionError)


def test_aggregate_never_returns_hidden_entries(tmp_path, make_file):
    first = tmp_path / "first"
    second = tmp_path / "second"
    make_file(first, ".hidden")
    make_file(first, "shown.txt")
    make_file(second, ".env")
    (second / ".cache").mkdir()

    result = aggregate([first, second])

    assert [e.name for e in result] == ["shown.txt"]


@requires_mtime_fallback
def test_aggregate_orders_by_creation_time_on_disk(tmp_path, make_file, base_time):
    """T1 < T2 < T3 の順に作成されたファイルは [T3, T2, T1] で返る"""
    make_file(tmp_path, "t2.txt", created_at=base_time + timedelta(minutes=2))
    make_file(tmp_path, "t1.txt", created_at=base_time + timedelta(minutes=1))
    make_file(tmp_path, "t3.txt", created_at=base_time + timedelta(minutes=3))

    result = aggregate([tmp_path])

    assert [e.name for e in result] == ["t3.txt", "t2.txt", "t1.txt"]


# ページング ----------------------------------------------------------------

@pytest.fixture
def forty_five(base_time):
    return [make_entry(f"f{i:02d}", base_time - timedelta(minutes=i)) for i in range(45)]


def test_paginate_first_page(forty_five):
    items, total = paginate(forty_five, 20, 0)

    assert len(items) == 20
    assert total == 3
    assert items[0].name == "f00"


def test_paginate_last_page_returns_remainder(forty_five):
    items, total = paginate(forty_five, 20, 2)

    assert [e.name for e in items] == ["f40", "f41", "f42", "f43", "f44"]
    assert total == 3


@pytest.mark.parametrize("index", [3, 10, -1])
def test_paginate_out_of_range_returns_empty(forty_five, index):
    items, total = paginate(forty_five, 20, index)

    assert items == []
    assert total == 3


def test_paginate_empty_sequence():
    assert paginate([], 20, 0) == ([], 0)


def test_paginate_rejects_non_positive_size(forty_five):
    with pytest.raises(ValueError):
        paginate(forty_five, 0, 0)


def test_aggregate_result_page_delegates(forty_five):
    result = AggregateResult(entries=forty_five)

    items, total = result.page(20, 1)

    assert len(items) == 20
    assert total == 3
    assert result.total_pages(50) == 1


@pytest.mark.parametrize(
    "index, pages, expected",
    [
        (0, 3, 0),
        (2, 3, 2),
        (5, 3, 2),
        (-4, 3, 0),
        (3, 0, 0),
    ],
)
def test_clamp_page_index(index, pages, expected):
    assert clamp_page_index(index, pages) == expected


def test_filter_entries_ignores_case_and_width(base_time):
    entries = [
        make_entry("Report.PDF", base_time),
        make_entry("ｒｅｐｏｒｔ_draft.txt", base_time),
        make_entry("photo.png", base_time),
    ]

    assert [e.name for e in filter_entries(entries, "report")] == ["Report.PDF", "ｒｅｐｏｒｔ_draft.txt"]
    assert len(filter_entries(entries, "")) == 3
