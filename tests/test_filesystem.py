import os
import stat

import pytest

from nomadpack.filesystem import copy_dir, copy_file, maybe_create_destination_dir
from nomadpack.logger import TestLogger


@pytest.fixture
def messages():
    return []


@pytest.fixture
def logger(messages):
    return TestLogger(messages.append)


def test_copy_dir_into_new_destination(tmp_path, logger):
    old_dir = tmp_path / "old"
    new_dir = tmp_path / "new"
    old_dir.mkdir()
    new_dir.mkdir()
    (old_dir / "test").mkdir(mode=0o755)
    (old_dir / "test" / "test.txt").write_bytes(b"test")

    copy_dir(str(old_dir), str(new_dir / "test"), False, logger)

    assert sorted(os.listdir(new_dir)) == ["test"]
    assert sorted(os.listdir(new_dir / "test")) == ["test"]
    assert sorted(os.listdir(new_dir / "test" / "test")) == ["test.txt"]
    assert (new_dir / "test" / "test" / "test.txt").read_bytes() == b"test"


def test_copy_dir_refuses_existing_destination(tmp_path, logger, messages):
    source = tmp_path / "src"
    source.mkdir()
    destination = tmp_path / "dst"
    destination.mkdir()
    with pytest.raises(FileExistsError, match="destination already exists"):
        copy_dir(str(source), str(destination), False, logger)
    assert messages == ["destination already exists"]


def test_copy_dir_requires_directory_source(tmp_path, logger, messages):
    source = tmp_path / "file.txt"
    source.write_text("data")
    with pytest.raises(NotADirectoryError):
        copy_dir(str(source), str(tmp_path / "dst"), False, logger)
    assert messages == ["source is not a directory"]


def test_copy_dir_missing_source_logs(tmp_path, logger, messages):
    with pytest.raises(FileNotFoundError):
        copy_dir(str(tmp_path / "missing"), str(tmp_path / "dst"), False, logger)
    assert messages[0].startswith("error getting source directory info:")


def test_copy_dir_overwrite_replaces_files(tmp_path, logger):
    source = tmp_path / "src"
    source.mkdir()
    (source / "a.txt").write_text("new")
    destination = tmp_path / "dst"
    destination.mkdir()
    (destination / "a.txt").write_text("old")
    (destination / "keep.txt").write_text("keep")

    copy_dir(str(source), str(destination), True, logger)

    assert (destination / "a.txt").read_text() == "new"
    assert (destination / "keep.txt").read_text() == "keep"


def test_copy_dir_skips_symlinks(tmp_path, logger):
    source = tmp_path / "src"
    source.mkdir()
    (source / "real.txt").write_text("real")
    os.symlink(source / "real.txt", source / "link.txt")

    copy_dir(str(source), str(tmp_path / "dst"), False, logger)

    assert sorted(os.listdir(tmp_path / "dst")) == ["real.txt"]


def test_copy_file_copies_content_and_mode(tmp_path, logger):
    source = tmp_path / "src.txt"
    source.write_bytes(b"payload\x00bytes")
    os.chmod(source, 0o640)
    destination = tmp_path / "dst.txt"

    copy_file(str(source), str(destination), logger)

    assert destination.read_bytes() == b"payload\x00bytes"
    assert stat.S_IMODE(os.stat(destination).st_mode) == 0o640


def test_copy_file_missing_source(tmp_path, logger, messages):
    with pytest.raises(FileNotFoundError):
        copy_file(str(tmp_path / "nope"), str(tmp_path / "out"), logger)
    assert messages[0].startswith("error opening source file:")
    assert not (tmp_path / "out").exists()


def test_maybe_create_makes_nested_directories(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    maybe_create_destination_dir(str(target))
    assert target.is_dir()


def test_maybe_create_existing_is_fine_by_default(tmp_path):
    maybe_create_destination_dir(str(tmp_path))
    assert tmp_path.is_dir()


def test_maybe_create_errors_on_existing_when_asked(tmp_path):
    with pytest.raises(FileExistsError):
        maybe_create_destination_dir(str(tmp_path), err_on_exists=True)