"""Unit tests for the output writer."""

from unittest.mock import patch

import pytest

from mdxpack.core.errors import FileSystemError
from mdxpack.core.types import OutputArtifact
from mdxpack.core.writer import reset_output_dir, write_artifact


class TestResetOutputDir:
    def test_creates_missing_directory(self, tmp_path):
        out = tmp_path / "dist"

        assert reset_output_dir(out) == out
        assert out.is_dir()

    def test_clears_previous_contents(self, tmp_path):
        out = tmp_path / "dist"
        (out / "nested").mkdir(parents=True)
        (out / "old_1.md").write_text("stale")
        (out / "nested" / "old.md").write_text("stale")

        reset_output_dir(out)

        assert out.is_dir()
        assert list(out.iterdir()) == []

    def test_delete_failure_is_ignored(self, tmp_path):
        out = tmp_path / "dist"
        with patch("mdxpack.core.writer.shutil.rmtree", side_effect=PermissionError("denied")):
            reset_output_dir(out)
        assert out.is_dir()

    def test_create_failure_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(FileSystemError):
            reset_output_dir(blocker / "dist")


class TestWriteArtifact:
    def test_writes_content(self, tmp_path):
        artifact = OutputArtifact(name="a_b_1.md", content="hello\n", batch_index=1)

        path = write_artifact(tmp_path, artifact)

        assert path == tmp_path / "a_b_1.md"
        assert path.read_text(encoding="utf-8") == "hello\n"

    def test_overwrites_existing(self, tmp_path):
        (tmp_path / "x.md").write_text("old")

        write_artifact(tmp_path, OutputArtifact(name="x.md", content="new", batch_index=1))

        assert (tmp_path / "x.md").read_text() == "new"

    def test_creates_intermediate_directories(self, tmp_path):
        artifact = OutputArtifact(name="sub/dir/out.md", content="x", batch_index=1)

        path = write_artifact(tmp_path / "dist", artifact)

        assert path.read_text() == "x"

    def test_write_failure_raises(self, tmp_path):
        (tmp_path / "taken").mkdir()
        artifact = OutputArtifact(name="taken", content="x", batch_index=1)

        with pytest.raises(FileSystemError) as exc_info:
            write_artifact(tmp_path, artifact)

        assert exc_info.value.path == tmp_path / "taken"
