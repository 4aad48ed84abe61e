"""Integration-style tests for the packer over real directory trees."""

from pathlib import Path

import pytest

from mdxpack.config import PackConfig
from mdxpack.core.errors import FileSystemError, MdxpackError
from mdxpack.core.packer import Packer
from mdxpack.core.planner import count_words
from mdxpack.core.policy import DirectoryGrouped, SizeBounded


def _tree(root: Path, files: dict) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def packer():
    return Packer(PackConfig(sort_entries=True))


class TestSizeBoundedRun:
    def test_three_file_scenario(self, workspace, packer):
        _tree(workspace / "docs", {"a.mdx": "hello", "b.mdx": "world foo", "c.mdx": "bar"})

        summary = packer.run("docs", SizeBounded(threshold=10))

        dist = workspace / "dist"
        assert sorted(p.name for p in dist.iterdir()) == ["a_b_1.md", "c_2.md"]
        assert (dist / "a_b_1.md").read_text() == (
            "-----------------\nFILE PATH: docs/a.mdx\n\nhello\n\n"
            "-----------------\nFILE PATH: docs/b.mdx\n\nworld foo\n\n"
        )
        assert (dist / "c_2.md").read_text() == "-----------------\nFILE PATH: docs/c.mdx\n\nbar\n\n"
        assert summary.files_found == 3
        assert summary.artifacts_written == 2
        assert summary.artifact_paths == ["dist/a_b_1.md", "dist/c_2.md"]

    def test_every_file_in_exactly_one_artifact(self, workspace, packer):
        files = {f"sec{i % 3}/page{i}.mdx": " ".join(["w"] * (i + 1)) for i in range(12)}
        _tree(workspace / "docs", files)

        packer.run("docs", SizeBounded(threshold=15))

        combined = "".join(p.read_text() for p in sorted((workspace / "dist").iterdir()))
        for relative in files:
            assert combined.count(f"FILE PATH: docs/{relative}\n") == 1

    def test_non_final_artifacts_meet_threshold(self, workspace, packer):
        files = {f"page{i:02d}.mdx": " ".join(["w"] * (i % 5 + 1)) for i in range(20)}
        _tree(workspace / "docs", files)

        packer.run("docs", SizeBounded(threshold=25))

        artifacts = sorted(
            (workspace / "dist").iterdir(),
            key=lambda p: int(p.stem.rsplit("_", 1)[1]),
        )
        for artifact in artifacts[:-1]:
            assert count_words(artifact.read_text()) >= 25

    def test_rerun_is_identical(self, workspace, packer):
        _tree(workspace / "docs", {"x.mdx": "one two", "y/z.mdx": "three"})

        packer.run("docs", SizeBounded(threshold=6))
        first = {p.name: p.read_text() for p in (workspace / "dist").iterdir()}
        packer.run("docs", SizeBounded(threshold=6))
        second = {p.name: p.read_text() for p in (workspace / "dist").iterdir()}

        assert first == second

    def test_previous_output_removed(self, workspace, packer):
        _tree(workspace / "docs", {"a.mdx": "a"})
        _tree(workspace / "dist", {"stale_9.md": "old"})

        packer.run("docs", SizeBounded(threshold=100))

        assert [p.name for p in (workspace / "dist").iterdir()] == ["a_1.md"]

    def test_progress_callback(self, workspace, packer):
        _tree(workspace / "docs", {"a.mdx": "a", "b.mdx": "b"})
        seen = []

        packer.run("docs", SizeBounded(threshold=1), progress_callback=lambda p, b: seen.append((p, b.index)))

        assert seen == [(Path("dist/a_1.md"), 1), (Path("dist/b_2.md"), 2)]


class TestDirectoryGroupedRun:
    def test_one_artifact_per_directory(self, workspace, packer):
        _tree(workspace / "docs", {
            "index.mdx": "home",
            "guides/intro.mdx": "intro",
            "guides/setup.mdx": "setup",
            "api/auth.mdx": "auth",
            "api/notes.txt": "ignored",
            "empty/readme.md": "ignored",
        })

        summary = packer.run("docs", DirectoryGrouped())

        dist = workspace / "dist"
        assert sorted(p.name for p in dist.iterdir()) == ["api.md", "docs.md", "guides.md"]
        assert (dist / "guides.md").read_text() == (
            "-----------------\nFILE PATH: docs/guides/intro.mdx\n\nintro\n\n"
            "-----------------\nFILE PATH: docs/guides/setup.mdx\n\nsetup\n\n"
        )
        assert summary.policy == "directory-grouped"

    def test_colliding_names_overwrite(self, workspace, packer, caplog):
        _tree(workspace / "docs", {"a/shared/x.mdx": "first", "b/shared/y.mdx": "second"})

        summary = packer.run("docs", DirectoryGrouped())

        assert summary.artifacts_written == 2
        assert [p.name for p in (workspace / "dist").iterdir()] == ["shared.md"]
        assert "second" in (workspace / "dist" / "shared.md").read_text()
        assert "repeats" in caplog.text


class TestEdgeCases:
    def test_empty_source(self, workspace, packer):
        (workspace / "docs").mkdir()

        summary = packer.run("docs", SizeBounded(threshold=10))

        assert (workspace / "dist").is_dir()
        assert list((workspace / "dist").iterdir()) == []
        assert summary.artifacts_written == 0

    def test_missing_source_raises(self, workspace, packer):
        with pytest.raises(FileSystemError):
            packer.run("nope", SizeBounded(threshold=10))

    def test_custom_output_and_extension(self, workspace):
        _tree(workspace / "docs", {"a.md": "x", "b.mdx": "y"})
        packer = Packer(PackConfig(output_dir=Path("out/bundle"), source_extension=".md"))

        packer.run("docs", SizeBounded(threshold=100))

        assert [p.name for p in (workspace / "out" / "bundle").iterdir()] == ["a_1.md"]

    @pytest.mark.parametrize("output_dir", [".", "docs", ".."])
    def test_refuses_output_containing_source(self, workspace, output_dir):
        _tree(workspace / "docs", {"a.mdx": "x"})
        packer = Packer(PackConfig(output_dir=Path(output_dir)))

        with pytest.raises(MdxpackError):
            packer.run("docs", SizeBounded(threshold=10))

        assert (workspace / "docs" / "a.mdx").exists()
