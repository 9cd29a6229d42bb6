"""Discovery, artifact paths, per-artifact errors and writing."""

from pathlib import Path

import pytest

from ghwire.build import Artifact, artifact_path, build, build_source, slug
from ghwire.codeowners import Codeowners, Rule
from ghwire.dependabot import Dependabot
from ghwire.discover import (
    CODEOWNERS,
    DEPENDABOT,
    DISCUSSION_TEMPLATE,
    ISSUE_TEMPLATE,
    PR_TEMPLATE,
    WORKFLOW,
    Declaration,
    discover,
    find_declaration_files,
    kind_of,
    load_file,
)
from ghwire.errors import DiscoveryError, DuplicateArtifact, IncompleteRequired
from ghwire.model import Job, Workflow
from ghwire.templates import DiscussionTemplate, IssueTemplate, PRTemplate
from ghwire.writer import UNCHANGED, WRITTEN, atomic_write, write_artifacts


def decl(kind, name, value):
    return Declaration(kind=kind, name=name, value=value, source="test")


class TestDiscover:
    def test_finds_public_modules_only(self, declarations_dir):
        assert [p.name for p in find_declaration_files(declarations_dir)] == ["ci.py"]

    def test_single_file_source(self, declarations_dir):
        assert find_declaration_files(declarations_dir / "ci.py") == [declarations_dir / "ci.py"]

    def test_missing_source(self, tmp_path):
        with pytest.raises(DiscoveryError):
            find_declaration_files(tmp_path / "nope")

    def test_collects_artifacts_in_definition_order(self, declarations_dir):
        found = list(discover(declarations_dir))
        assert [(d.kind, d.name) for d in found] == [(WORKFLOW, "CI"), (CODEOWNERS, "owners")]

    def test_declarations_function(self, tmp_path):
        path = tmp_path / "decls.py"
        path.write_text(
            "from ghwire.codeowners import Codeowners, Rule\n"
            "ignored = Codeowners()\n"
            "def declarations():\n"
            "    return {'team_owners': Codeowners(rules=[Rule('*', ['@t'])])}\n"
        )
        assert [d.name for d in load_file(path)] == ["team_owners"]

    def test_declarations_must_return_dict(self, tmp_path):
        path = tmp_path / "bad.py"
        path.write_text("def declarations():\n    return []\n")
        with pytest.raises(DiscoveryError):
            load_file(path)

    def test_declarations_function_failure(self, tmp_path):
        path = tmp_path / "decls.py"
        path.write_text("def declarations():\n    raise ValueError('boom')\n")
        with pytest.raises(DiscoveryError, match="boom") as exc:
            load_file(path)
        assert "decls.py" in exc.value.message
        assert isinstance(exc.value.__cause__, ValueError)

    def test_load_failure(self, tmp_path):
        path = tmp_path / "broken.py"
        path.write_text("raise RuntimeError('boom')\n")
        with pytest.raises(DiscoveryError, match="boom"):
            load_file(path)

    def test_non_python_file(self, tmp_path):
        path = tmp_path / "ci.yml"
        path.write_text("name: x\n")
        with pytest.raises(DiscoveryError):
            load_file(path)

    def test_kind_of(self):
        assert kind_of(Workflow()) == WORKFLOW
        assert kind_of(Dependabot()) == DEPENDABOT
        assert kind_of(PRTemplate()) == PR_TEMPLATE
        assert kind_of("nope") is None


class TestPaths:
    @pytest.mark.parametrize("name,expected", [
        ("CIWorkflow", "ci-workflow"),
        ("release_flow", "release-flow"),
        ("BugReport", "bug-report"),
        ("ci", "ci"),
    ])
    def test_slug(self, name, expected):
        assert slug(name) == expected

    @pytest.mark.parametrize("kind,name,value,path", [
        (WORKFLOW, "CIWorkflow", Workflow(), ".github/workflows/ci-workflow.yml"),
        (DEPENDABOT, "deps", Dependabot(), ".github/dependabot.yml"),
        (ISSUE_TEMPLATE, "BugReport", IssueTemplate(), ".github/ISSUE_TEMPLATE/bug-report.yml"),
        (DISCUSSION_TEMPLATE, "ideas", DiscussionTemplate(), ".github/DISCUSSION_TEMPLATE/ideas.yml"),
        (PR_TEMPLATE, "pr", PRTemplate(), ".github/PULL_REQUEST_TEMPLATE.md"),
        (PR_TEMPLATE, "pr", PRTemplate(name="release"), ".github/PULL_REQUEST_TEMPLATE/release.md"),
        (CODEOWNERS, "owners", Codeowners(), ".github/CODEOWNERS"),
    ])
    def test_artifact_path(self, kind, name, value, path):
        assert artifact_path(decl(kind, name, value)) == path


class TestBuild:
    def test_build_source(self, declarations_dir):
        result = build_source(declarations_dir)
        assert result.ok
        assert [a.path for a in result.artifacts] == [".github/CODEOWNERS", ".github/workflows/ci.yml"]

    def test_failures_do_not_stop_other_artifacts(self):
        broken = Workflow(name="broken", jobs={"a": Job(runs_on="ubuntu-latest")})
        owners = Codeowners(rules=[Rule("*", ["@a"])])
        result = build([decl(WORKFLOW, "broken", broken), decl(CODEOWNERS, "owners", owners)])
        assert not result.ok
        assert [a.name for a in result.artifacts] == ["owners"]
        [error] = result.errors
        assert isinstance(error, IncompleteRequired)
        assert error.artifact == "broken"
        assert error.path == "jobs.a.steps"

    def test_duplicate_paths(self):
        owners = Codeowners(rules=[Rule("*", ["@a"])])
        result = build([decl(CODEOWNERS, "one", owners), decl(CODEOWNERS, "two", owners)])
        assert [a.name for a in result.artifacts] == ["one"]
        [error] = result.errors
        assert isinstance(error, DuplicateArtifact)
        assert error.artifact == "two"


class TestWriter:
    def test_write_then_unchanged(self, tmp_path):
        artifacts = [Artifact(path=".github/CODEOWNERS", content=b"* @a\n")]
        [(path, status)] = write_artifacts(artifacts, tmp_path)
        assert status == WRITTEN
        assert path.read_bytes() == b"* @a\n"
        assert write_artifacts(artifacts, tmp_path) == [(path, UNCHANGED)]

    def test_overwrite_changed_content(self, tmp_path):
        target = tmp_path / ".github" / "CODEOWNERS"
        target.parent.mkdir()
        target.write_bytes(b"old\n")
        [(_, status)] = write_artifacts([Artifact(path=".github/CODEOWNERS", content=b"new\n")], tmp_path)
        assert status == WRITTEN
        assert target.read_bytes() == b"new\n"

    def test_atomic_write_leaves_no_temp_files(self, tmp_path):
        target = tmp_path / "out" / "file.yml"
        atomic_write(target, b"x: 1\n")
        assert [p.name for p in target.parent.iterdir()] == ["file.yml"]

    def test_atomic_write_cleans_up_on_failure(self, tmp_path, monkeypatch):
        def fail(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("ghwire.writer.os.replace", fail)
        with pytest.raises(OSError):
            atomic_write(tmp_path / "file.yml", b"x")
        assert list(tmp_path.iterdir()) == []
