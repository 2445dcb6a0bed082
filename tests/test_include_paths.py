from pathlib import Path

import pytest

from analyzer_engines.services.include_paths import IncludePathsBuilder


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (tmp_path / "root_file.rb").write_text("")
    (tmp_path / "subdir").mkdir()
    (tmp_path / "subdir" / "subdir_file.rb").write_text("")
    (tmp_path / "subdir" / "nested").mkdir()
    (tmp_path / "subdir" / "nested" / "deep.rb").write_text("")
    return tmp_path


def build(root: Path, exclude_paths=(), requested_paths=()):
    return IncludePathsBuilder(list(exclude_paths), list(requested_paths), root=str(root)).build()


def test_everything_included_collapses_to_root(project: Path):
    assert build(project) == ["./"]


def test_empty_directory_collapses_to_root(tmp_path: Path):
    assert build(tmp_path) == ["./"]


def test_git_directory_never_listed(tmp_path: Path):
    (tmp_path / ".git").mkdir()
    (tmp_path / "a.rb").write_text("")
    (tmp_path / "b.rb").write_text("")
    assert build(tmp_path, exclude_paths=["b.rb"]) == ["a.rb"]


def test_excluded_file_expands_parent(project: Path):
    assert build(project, exclude_paths=["root_file.rb"]) == ["subdir/"]


def test_partially_excluded_directory_recurses(project: Path):
    assert build(project, exclude_paths=["subdir/nested/deep.rb"]) == [
        "root_file.rb",
        "subdir/subdir_file.rb",
    ]


def test_excluded_directory_covers_its_contents(project: Path):
    assert build(project, exclude_paths=["subdir/"]) == ["root_file.rb"]
    assert build(project, exclude_paths=["./subdir"]) == ["root_file.rb"]


def test_fully_included_subdirectory_collapses(project: Path):
    assert build(project, exclude_paths=["subdir/subdir_file.rb"]) == [
        "root_file.rb",
        "subdir/nested/",
    ]


def test_requested_paths_preserve_order(project: Path):
    assert build(project, requested_paths=["subdir", "root_file.rb"]) == [
        "subdir/",
        "root_file.rb",
    ]


def test_requested_paths_are_normalized_and_deduplicated(project: Path):
    assert build(project, requested_paths=["./root_file.rb", "root_file.rb", "subdir/"]) == [
        "root_file.rb",
        "subdir/",
    ]


def test_requested_excluded_path_is_dropped(project: Path):
    assert build(
        project,
        exclude_paths=["subdir/nested/"],
        requested_paths=["subdir/nested/deep.rb", "subdir"],
    ) == ["subdir/subdir_file.rb"]


def test_requested_missing_path_is_dropped(project: Path):
    assert build(project, requested_paths=["nope.rb", "root_file.rb"]) == ["root_file.rb"]


def test_requested_root_behaves_like_no_request(project: Path):
    assert build(project, requested_paths=["."]) == ["./"]


def test_requested_git_directory_is_ignored(project: Path):
    assert build(project, requested_paths=[".git"]) == []
