import errno
import os

import pytest

from aspellkit.dirent import DirEntry, Directory, FileType, opendir


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("hello")
    (tmp_path / "sub").mkdir()
    os.symlink(tmp_path / "a.txt", tmp_path / "link")
    return tmp_path


def test_entry_type_values(tree):
    with opendir(tree) as d:
        types = {e.name: int(e.type) for e in d}
    assert types["sub"] == 4
    assert types["a.txt"] == 8
    assert types["link"] == 10


def test_lists_all_entries_with_types(tree):
    with opendir(tree) as d:
        entries = {e.name: e.type for e in d}
    assert entries == {
        ".": FileType.DIR,
        "..": FileType.DIR,
        "a.txt": FileType.REG,
        "sub": FileType.DIR,
        "link": FileType.LNK,
    }


def test_dot_entries_come_first(tree):
    with Directory(tree) as d:
        first = d.read()
        second = d.read()
    assert (first.name, second.name) == (".", "..")


def test_read_returns_none_at_end(tree):
    with opendir(tree) as d:
        names = list(d)
        assert d.read() is None
    assert len(names) == 5


def test_tell_reports_entry_count(tree):
    with opendir(tree) as d:
        d.read()
        count = d.tell()
        rest = list(d)
    assert count == len(rest) + 1


def test_seek_and_rewind(tree):
    with opendir(tree) as d:
        everything = list(d)
        d.seek(2)
        assert d.read() == everything[2]
        d.rewind()
        assert list(d) == everything


def test_seek_past_end_is_ignored(tree):
    with opendir(tree) as d:
        d.read()
        d.seek(d.tell())
        after = d.read()
    assert after.name == ".."


def test_seek_negative_rejected(tree):
    with opendir(tree) as d:
        with pytest.raises(ValueError):
            d.seek(-1)


def test_namelen_matches_name(tree):
    with opendir(tree) as d:
        assert all(e.namelen == len(e.name) for e in d)


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError) as info:
        opendir(tmp_path / "nope")
    assert info.value.errno == errno.ENOENT


def test_file_is_not_a_directory(tree):
    with pytest.raises(FileNotFoundError) as info:
        opendir(tree / "a.txt")
    assert info.value.errno == errno.ENOENT


def test_closed_directory_rejects_use(tree):
    d = opendir(tree)
    d.close()
    assert d.closed
    with pytest.raises(OSError) as info:
        d.read()
    assert info.value.errno == errno.EBADF
    with pytest.raises(OSError) as info:
        d.close()
    assert info.value.errno == errno.EBADF


def test_context_manager_closes(tree):
    with opendir(str(tree)) as d:
        pass
    assert d.closed


def test_bytes_path_accepted(tree):
    with opendir(os.fsencode(str(tree))) as d:
        names = sorted(e.name for e in d)
    assert names == sorted([".", "..", "a.txt", "sub", "link"])


def test_entry_is_value_object():
    assert DirEntry("x", FileType.REG) == DirEntry("x", FileType.REG)
    assert DirEntry("x", FileType.REG).off == 0