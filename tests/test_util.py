import threading
import time

import pytest

from plogpy.util import (
    File,
    Timestamp,
    gettid,
    local_time,
    process_func_name,
    rename,
    split_file_name,
    unlink,
    utc_time,
)


def test_timestamp_now_is_close_to_clock():
    before = time.time()
    stamp = Timestamp.now()
    after = time.time()
    assert 0 <= stamp.millitm <= 999
    assert int(before) <= stamp.time <= int(after) + 1


def test_utc_time_of_epoch():
    t = utc_time(Timestamp(0, 0))
    assert (t.tm_year, t.tm_mon, t.tm_mday) == (1970, 1, 1)
    assert (t.tm_hour, t.tm_min, t.tm_sec) == (0, 0, 0)


def test_local_time_matches_time_module():
    stamp = Timestamp(86400 * 365, 5)
    assert local_time(stamp) == time.localtime(stamp.time)


def test_gettid_is_native_thread_id():
    assert gettid() == threading.get_native_id()


def test_gettid_in_worker_thread_is_that_threads_id():
    results = {}

    def work():
        results["tid"] = gettid()
        results["native"] = threading.get_native_id()

    worker = threading.Thread(target=work)
    worker.start()
    worker.join()

    main_tid = gettid()
    main_native = threading.get_native_id()

    assert results["tid"] == results["native"]
    assert main_tid == main_native
    assert sorted([results["tid"], main_tid]) == sorted(
        [results["native"], main_native]
    )
    assert len({results["tid"], main_tid}) == 2


@pytest.mark.parametrize(
    "func, expected",
    [
        ("void MyClass::method(int)", "MyClass::method"),
        ("int main()", "main"),
        ("foo(void)", "foo"),
        ("no_parentheses", "no_parentheses"),
    ],
)
def test_process_func_name(func, expected):
    assert process_func_name(func) == expected


def test_process_func_name_space_after_paren_is_ignored():
    assert process_func_name("static void f(int a, int b)") == "f"


def test_split_file_name_with_extension():
    assert split_file_name("Demo.csv") == ("Demo", "csv")


def test_split_file_name_uses_last_dot():
    assert split_file_name("archive.tar.gz") == ("archive.tar", "gz")


def test_split_file_name_without_extension():
    assert split_file_name("logfile") == ("logfile", "")


@pytest.mark.parametrize("name", ["a.b", "x.y.z", "plain", "trailing."])
def test_split_file_name_round_trip(name):
    stem, ext = split_file_name(name)
    assert (stem + "." + ext if "." in name else stem) == name


def test_file_open_new_returns_zero(tmp_path):
    path = tmp_path / "log.txt"
    with File() as f:
        assert f.open(path) == 0
        assert f.is_open
    assert path.exists()


def test_file_write_appends_and_reopen_reports_size(tmp_path):
    path = tmp_path / "log.txt"
    with File(path) as f:
        assert f.write(b"hello ") == 6
        assert f.write("world") == 5
    with File() as f:
        assert f.open(path) == 11
        f.write(b"!")
    assert path.read_bytes() == b"hello world!"


def test_file_write_text_as_utf8(tmp_path):
    path = tmp_path / "u.txt"
    text = "котэ"
    with File(path) as f:
        written = f.write(text)
    assert written == len(text.encode("utf-8"))
    assert path.read_text(encoding="utf-8") == text


def test_file_write_when_closed_raises(tmp_path):
    f = File(tmp_path / "c.txt")
    f.close()
    assert not f.is_open
    with pytest.raises(OSError):
        f.write(b"x")


def test_file_open_in_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        File(tmp_path / "missing" / "log.txt")


def test_file_close_twice_is_harmless(tmp_path):
    f = File(tmp_path / "d.txt")
    f.close()
    f.close()
    assert f.is_open is False


def test_rename_and_unlink(tmp_path):
    old = tmp_path / "a.log"
    new = tmp_path / "b.log"
    old.write_bytes(b"data")
    rename(old, new)
    assert not old.exists()
    assert new.read_bytes() == b"data"
    unlink(new)
    assert not new.exists()


def test_unlink_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        unlink(tmp_path / "nothing.log")