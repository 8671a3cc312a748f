from meshkitutils.git import read_git_version


def test_reads_commit_then_version(tmp_path):
    path = tmp_path / "version"
    path.write_text(" abc123 \nv1.2.3\n")
    assert read_git_version(path) == ("v1.2.3", "abc123")


def test_missing_file_gives_empty_values(tmp_path):
    assert read_git_version(tmp_path / "nope") == ("", "")


def test_only_commit_present(tmp_path):
    path = tmp_path / "version"
    path.write_text("deadbeef\n")
    assert read_git_version(path) == ("", "deadbeef")


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "version"
    path.write_text("\nc1\n\nv0.1\n")
    assert read_git_version(path) == ("v0.1", "c1")


def test_extra_rows_ignored(tmp_path):
    path = tmp_path / "version"
    path.write_text("c1\nv2\nlater\n")
    assert read_git_version(path) == ("v2", "c1")


def test_inconsistent_field_count_gives_empty(tmp_path):
    path = tmp_path / "version"
    path.write_text("c1,extra\nv2\n")
    assert read_git_version(path) == ("", "")