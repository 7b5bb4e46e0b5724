"""End-to-end tests for the mdb-publish command against fake collaborators."""

from pathlib import Path

from click.testing import CliRunner

from mdb_publish.cli.cli import cli
from mdb_publish.core.context import PublishContext
from mdb_publish.gateway.console.fake import FakeConsole
from mdb_publish.gateway.git.fake import FakeGitTagOps
from mdb_publish.gateway.inspector.fake import FakeArtifactInspector
from mdb_publish.gateway.shell.fake import FakeShell
from mdb_publish.gateway.store.fake import FakeObjectStore
from mdb_publish.gateway.store.types import StoreEntry

ROOT = "/Joyent_Dev/public/mdb_v8"
DEST = f"{ROOT}/v2.0.0"


def _make_release_tree(tmp_path: Path, version_text: str = "2.0.0\n") -> None:
    (tmp_path / "version").write_text(version_text, encoding="utf-8")
    for arch in ("ia32", "amd64"):
        artifact = tmp_path / "build" / arch / "mdb_v8.so"
        artifact.parent.mkdir(parents=True)
        artifact.write_bytes(b"\x7fELF")


def test_publishes_without_touching_latest(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    git = FakeGitTagOps()
    store = FakeObjectStore()
    console = FakeConsole()
    inspector = FakeArtifactInspector()
    ctx = PublishContext.for_test(
        cwd=tmp_path, git=git, store=store, console=console, inspector=inspector
    )

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert inspector.inspected == [
        tmp_path / "build/ia32/mdb_v8.so",
        tmp_path / "build/amd64/mdb_v8.so",
    ]
    assert git.created_tags == [("v2.0.0", "v2.0.0")]
    assert console.prompts == []
    assert store.created_dirs == [DEST]
    assert store.uploads == [
        (tmp_path / "build/ia32/mdb_v8.so", f"{DEST}/mdb_v8_ia32.so"),
        (tmp_path / "build/amd64/mdb_v8.so", f"{DEST}/mdb_v8_amd64.so"),
    ]
    assert store.objects == {}
    assert f"{ROOT}/latest was NOT updated" in result.output
    assert "git push origin v2.0.0" in result.output


def test_update_latest_flag_repoints_latest(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore()
    ctx = PublishContext.for_test(cwd=tmp_path, store=store)

    result = CliRunner().invoke(cli, ["--update-latest"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert store.objects == {f"{ROOT}/latest": DEST}
    assert "NOT updated" not in result.output


def test_short_update_latest_flag(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore()
    ctx = PublishContext.for_test(cwd=tmp_path, store=store)

    result = CliRunner().invoke(cli, ["-l"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert store.objects == {f"{ROOT}/latest": DEST}


def test_declining_overwrite_aborts_before_upload(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore(directories={ROOT: [StoreEntry("v2.0.0", "directory")]})
    console = FakeConsole(answers=["n"])
    ctx = PublishContext.for_test(cwd=tmp_path, store=store, console=console)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert console.prompts == [f"{DEST} already exists. Overwrite?"]
    assert store.created_dirs == []
    assert store.uploads == []
    assert "Aborted" in result.output


def test_accepting_overwrite_uploads(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore(directories={ROOT: [StoreEntry("v2.0.0", "directory")]})
    ctx = PublishContext.for_test(cwd=tmp_path, store=store, console=FakeConsole(answers=["y"]))

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert len(store.uploads) == 2


def test_dev_build_fails_before_tagging_or_upload(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    git = FakeGitTagOps()
    store = FakeObjectStore()
    inspector = FakeArtifactInspector(tags={tmp_path / "build/amd64/mdb_v8.so": "dev"})
    ctx = PublishContext.for_test(cwd=tmp_path, git=git, store=store, inspector=inspector)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "is not a release build" in result.output
    assert git.created_tags == []
    assert store.list_calls == []
    assert store.uploads == []


def test_missing_artifact_fails(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    (tmp_path / "build/ia32/mdb_v8.so").unlink()
    inspector = FakeArtifactInspector()
    ctx = PublishContext.for_test(cwd=tmp_path, inspector=inspector)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "Artifact not found" in result.output
    assert inspector.inspected == []


def test_tag_failure_can_be_overridden(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore()
    console = FakeConsole(answers=["y"])
    git = FakeGitTagOps(existing_tags={"v2.0.0"})
    ctx = PublishContext.for_test(cwd=tmp_path, git=git, store=store, console=console)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert console.prompts == ["Failed to create tag v2.0.0. Continue anyway?"]
    assert "already exists" in result.output
    assert len(store.uploads) == 2


def test_tag_failure_declined_aborts(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore()
    git = FakeGitTagOps(existing_tags={"v2.0.0"})
    ctx = PublishContext.for_test(
        cwd=tmp_path, git=git, store=store, console=FakeConsole(answers=["n"])
    )

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert store.list_calls == []
    assert store.uploads == []


def test_missing_tool_fails(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore()
    ctx = PublishContext.for_test(cwd=tmp_path, shell=FakeShell(), store=store)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "Required tool 'mls' was not found" in result.output
    assert store.uploads == []


def test_comment_only_version_file_fails(tmp_path: Path) -> None:
    _make_release_tree(tmp_path, version_text="# nothing here\n\n")
    ctx = PublishContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "No version found" in result.output


def test_remote_listing_failure_is_fatal(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore(list_fails=True)
    ctx = PublishContext.for_test(cwd=tmp_path, store=store)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert f"Could not list {ROOT}" in result.output
    assert store.uploads == []


def test_upload_failure_is_fatal(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    store = FakeObjectStore(failing_uploads={f"{DEST}/mdb_v8_amd64.so"})
    ctx = PublishContext.for_test(cwd=tmp_path, store=store)

    result = CliRunner().invoke(cli, ["--update-latest"], obj=ctx)

    assert result.exit_code == 1
    assert store.uploads == [(tmp_path / "build/ia32/mdb_v8.so", f"{DEST}/mdb_v8_ia32.so")]
    assert store.objects == {}


def test_pointer_update_failure_is_fatal(tmp_path: Path) -> None:
    _make_release_tree(tmp_path)
    ctx = PublishContext.for_test(
        cwd=tmp_path, store=FakeObjectStore(pointer_write_fails=True)
    )

    result = CliRunner().invoke(cli, ["--update-latest"], obj=ctx)

    assert result.exit_code == 1
    assert f"Could not update {ROOT}/latest" in result.output


def test_unknown_option_is_usage_error(tmp_path: Path) -> None:
    ctx = PublishContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["--bogus"], obj=ctx)

    assert result.exit_code == 2


def test_help_lists_update_latest() -> None:
    result = CliRunner().invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "--update-latest" in result.output
