import pytest

from servicekit import fileutils


def test_copy_file_copies_content(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"payload")
    dst = tmp_path / "b.txt"
    fileutils.copy_file(str(src), str(dst))
    assert dst.read_bytes() == b"payload"
    assert src.exists()


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileutils.copy_file(str(tmp_path / "missing"), str(tmp_path / "out"))


def test_file_exists(tmp_path):
    f = tmp_path / "f"
    f.write_text("x")
    assert fileutils.file_exists(str(f)) is True
    assert fileutils.file_exists(str(tmp_path)) is True
    assert fileutils.file_exists(str(tmp_path / "nope")) is False


def test_dir_exists(tmp_path):
    f = tmp_path / "f"
    f.write_text("x")
    assert fileutils.dir_exists(str(tmp_path)) is True
    assert fileutils.dir_exists(str(f)) is False
    assert fileutils.dir_exists(str(tmp_path / "nope")) is False


def test_create_file_truncates(tmp_path):
    f = tmp_path / "f"
    f.write_text("old content")
    fileutils.create_file(str(f))
    assert f.read_bytes() == b""


def test_create_file_in_missing_dir_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileutils.create_file(str(tmp_path / "missing" / "f"))


def test_mkdir_all_nested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    assert fileutils.mkdir_all(str(target)) is True
    assert target.is_dir()
    assert fileutils.mkdir_all(str(target)) is True


def test_mkdir_all_over_file_fails(tmp_path):
    f = tmp_path / "f"
    f.write_text("x")
    assert fileutils.mkdir_all(str(f / "sub")) is False


def test_find_by_file_name_lexical_depth_first(tmp_path):
    (tmp_path / "a_data.txt").write_text("")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "data2.txt").write_text("")
    (tmp_path / "c_data.txt").write_text("")
    (tmp_path / "other.bin").write_text("")
    result = fileutils.find_by_file_name(str(tmp_path), "data")
    assert result == ["a_data.txt", "data2.txt", "c_data.txt"]


def test_find_by_file_name_skips_directory_names(tmp_path):
    (tmp_path / "data_dir").mkdir()
    assert fileutils.find_by_file_name(str(tmp_path), "data") == []


def test_find_by_file_name_missing_dir(tmp_path):
    assert fileutils.find_by_file_name(str(tmp_path / "nope"), "x") == []


def test_move_file(tmp_path):
    src = tmp_path / "src.txt"
    src.write_bytes(b"moved")
    dst = tmp_path / "dst.txt"
    fileutils.move_file(str(src), str(dst))
    assert not src.exists()
    assert dst.read_bytes() == b"moved"


def test_move_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileutils.move_file(str(tmp_path / "missing"), str(tmp_path / "dst"))