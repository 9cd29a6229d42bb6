"""Workflow serialization: layout, ordering, job references and error kinds."""

import pytest
import yaml

from ghwire.actions import Checkout, SetupPython
from ghwire.errors import (
    IncompleteRequired,
    InvalidIdentifier,
    InvalidStepShape,
    UnknownJobReference,
    UnrenderableValue,
)
from ghwire.expressions import Expression, matrix, success
from ghwire.model import (
    READ,
    WRITE,
    Concurrency,
    Container,
    Environment,
    Job,
    Matrix,
    Permissions,
    Service,
    Step,
    Strategy,
    Workflow,
)
from ghwire.serialize import serialize, to_yaml
from ghwire.triggers import (
    Create,
    PullRequest,
    Push,
    Schedule,
    Triggers,
    WorkflowDispatch,
    WorkflowInput,
)


def render(workflow: Workflow) -> str:
    return to_yaml(workflow).decode("utf-8")


def run_job(*steps, **fields) -> Job:
    return Job(runs_on="ubuntu-latest", steps=list(steps) or [Step(run="true")], **fields)


class TestScenarios:
    def test_empty_workflow(self):
        out = render(Workflow(name="Empty"))
        assert "name: Empty\n" in out
        assert "on: {}\n" in out
        assert "jobs" not in out

    def test_matrix_expression_in_runs_on(self):
        wf = Workflow(name="M", jobs={
            "test": Job(
                runs_on=matrix.os,
                strategy=Strategy(matrix=Matrix(values={"os": ["ubuntu-latest", "macos-latest"]})),
                steps=[Step(run="make test")],
            ),
        })
        out = render(wf)
        assert "runs-on: ${{ matrix.os }}\n" in out
        assert out.index("- ubuntu-latest") < out.index("- macos-latest")
        data = yaml.safe_load(out)
        assert data["jobs"]["test"]["strategy"]["matrix"]["os"] == ["ubuntu-latest", "macos-latest"]

    def test_all_fields_step(self):
        step = Step(
            id="step1",
            name="Test Step",
            if_=success(),
            uses="actions/checkout@v4",
            with_={"fetch-depth": 0},
            env={"KEY": "value"},
            working_directory="/tmp",
            continue_on_error=True,
            timeout_minutes=30,
        )
        out = render(Workflow(name="S", jobs={"a": run_job(step)}))
        for line in (
            "id: step1",
            "name: Test Step",
            "if: ${{ success() }}",
            "uses: actions/checkout@v4",
            "with:",
            "fetch-depth: 0",
            "working-directory: /tmp",
            "continue-on-error: true",
            "timeout-minutes: 30",
        ):
            assert line in out

    def test_needs_with_string_reference(self):
        wf = Workflow(name="N", jobs={
            "build": run_job(),
            "test": run_job(needs=["build"]),
        })
        assert "    needs: [build]\n" in render(wf)

    def test_needs_as_single_string(self):
        """A bare job id is one prerequisite, not a list of characters."""
        wf = Workflow(name="N", jobs={
            "build": run_job(),
            "test": run_job(needs="build"),
        })
        out = render(wf)
        assert "    needs: [build]\n" in out
        assert yaml.safe_load(out)["jobs"]["test"]["needs"] == ["build"]

    def test_needs_as_single_job_value(self):
        build = run_job(name="build")
        wf = Workflow(name="N", jobs={"build": build, "test": run_job(needs=build)})
        assert "    needs: [build]\n" in render(wf)


class TestLayout:
    def test_top_level_key_order(self):
        wf = Workflow(
            name="CI",
            run_name="ci for ${{ github.ref }}",
            on=Triggers(push=Push()),
            env={"A": "1"},
            permissions=Permissions(contents=READ),
            jobs={"a": run_job()},
        )
        keys = [line.split(":")[0] for line in render(wf).splitlines() if line and not line.startswith(" ")]
        assert keys == ["name", "run-name", "on", "env", "permissions", "jobs"]

    def test_on_key_is_unquoted(self):
        out = render(Workflow(name="x", on=Triggers(push=Push(branches=["main"]))))
        assert "\non:\n  push:\n    branches:\n      - main\n" in out

    def test_trigger_order_and_payload_free_events(self):
        on = Triggers(
            create=Create(),
            schedule=[Schedule(cron="0 0 * * *")],
            pull_request=PullRequest(types=["opened"]),
            push=Push(),
        )
        out = render(Workflow(name="x", on=on))
        assert out.index("push: {}") < out.index("pull_request:") < out.index("schedule:") < out.index("create: {}")
        assert '- cron: "0 0 * * *"' in out

    def test_jobs_keep_insertion_order_maps_are_sorted(self):
        wf = Workflow(name="x", jobs={
            "zeta": run_job(env={"B": "2", "A": "1"}),
            "alpha": run_job(),
        })
        out = render(wf)
        assert out.index("zeta:") < out.index("alpha:")
        assert out.index("A: ") < out.index("B: ")

    def test_zero_values_are_omitted(self):
        out = render(Workflow(name="x", jobs={"a": run_job(Step(run="make", continue_on_error=False))}))
        assert "continue-on-error" not in out
        assert "timeout-minutes" not in out
        assert "needs" not in out

    def test_multiline_run(self):
        out = render(Workflow(name="x", jobs={"a": run_job(Step(run="make\nmake test\n"))}))
        assert "- run: |\n" in out
        assert yaml.safe_load(out)["jobs"]["a"]["steps"][0]["run"] == "make\nmake test\n"

    def test_needs_long_list_is_block(self):
        jobs = {k: run_job() for k in ("a", "b", "c", "d")}
        jobs["e"] = run_job(needs=["a", "b", "c", "d"])
        data = yaml.safe_load(render(Workflow(name="x", jobs=jobs)))
        assert data["jobs"]["e"]["needs"] == ["a", "b", "c", "d"]
        assert "needs: [" not in render(Workflow(name="x", jobs=jobs))

    def test_serializing_twice_is_identical(self, ci_workflow):
        assert to_yaml(ci_workflow) == to_yaml(ci_workflow)
        assert serialize(ci_workflow) == to_yaml(ci_workflow)

    def test_literal_if_passes_through(self):
        out = render(Workflow(name="x", jobs={"a": run_job(if_="github.event_name == 'push'")}))
        assert "if: \"github.event_name == 'push'\"" in out

    def test_expression_if_wrapped_once(self):
        out = render(Workflow(name="x", jobs={"a": run_job(if_=Expression("always()"))}))
        assert "if: ${{ always() }}" in out
        assert "${{ ${{" not in out


class TestJobFields:
    def test_permissions_and_shorthand(self):
        job = run_job(permissions=Permissions(contents=READ, id_token=WRITE, pull_requests=WRITE))
        data = yaml.safe_load(render(Workflow(name="x", permissions="read-all", jobs={"a": job})))
        assert data["permissions"] == "read-all"
        assert data["jobs"]["a"]["permissions"] == {"contents": "read", "id-token": "write", "pull-requests": "write"}

    def test_environment_concurrency_container_services(self):
        job = run_job(
            environment=Environment(name="prod", url="https://example.com"),
            concurrency=Concurrency(group="deploy", cancel_in_progress=True),
            container=Container(image="python:3.12"),
            services={"db": Service(image="postgres:16", ports=[5432], env={"POSTGRES_PASSWORD": "x"})},
        )
        data = yaml.safe_load(render(Workflow(name="x", jobs={"a": job})))["jobs"]["a"]
        assert data["environment"] == {"name": "prod", "url": "https://example.com"}
        assert data["concurrency"] == {"group": "deploy", "cancel-in-progress": True}
        assert data["container"] == {"image": "python:3.12"}
        assert data["services"]["db"]["ports"] == [5432]

    def test_strategy_fail_fast_false_is_kept(self):
        job = run_job(strategy=Strategy(matrix=Matrix(values={"py": ["3.11"]}), fail_fast=False, max_parallel=2))
        data = yaml.safe_load(render(Workflow(name="x", jobs={"a": job})))["jobs"]["a"]["strategy"]
        assert data == {"matrix": {"py": ["3.11"]}, "fail-fast": False, "max-parallel": 2}

    def test_matrix_include_exclude_follow_dimensions(self):
        m = Matrix(
            values={"py": ["3.11", "3.12"], "os": ["ubuntu-latest"]},
            include=[{"py": "3.13", "experimental": True}],
            exclude=[{"py": "3.11", "os": "ubuntu-latest"}],
        )
        data = yaml.safe_load(render(Workflow(name="x", jobs={"a": run_job(strategy=Strategy(matrix=m))})))
        assert list(data["jobs"]["a"]["strategy"]["matrix"]) == ["os", "py", "include", "exclude"]

    def test_matrix_exclude_unknown_dimension(self):
        with pytest.raises(ValueError, match="unknown dimension"):
            Matrix(values={"py": ["3.12"]}, exclude=[{"os": "windows-latest"}])

    def test_reusable_workflow_job(self):
        job = Job(uses="org/repo/.github/workflows/deploy.yml@main", with_={"env": "prod"}, secrets="inherit")
        data = yaml.safe_load(render(Workflow(name="x", jobs={"deploy": job})))["jobs"]["deploy"]
        assert data == {"uses": "org/repo/.github/workflows/deploy.yml@main", "with": {"env": "prod"}, "secrets": "inherit"}

    def test_action_wrappers_and_mappings_as_steps(self):
        job = run_job(
            Checkout(fetch_depth=0),
            SetupPython(python_version="3.12").step(name="Python", id="py"),
            {"run": "echo hi", "name": "raw"},
        )
        steps = yaml.safe_load(render(Workflow(name="x", jobs={"a": job})))["jobs"]["a"]["steps"]
        assert steps[0] == {"uses": "actions/checkout@v4", "with": {"fetch-depth": 0}}
        assert steps[1] == {"id": "py", "name": "Python", "uses": "actions/setup-python@v5",
                            "with": {"python-version": "3.12"}}
        assert steps[2] == {"name": "raw", "run": "echo hi"}

    def test_workflow_dispatch_inputs(self):
        on = Triggers(workflow_dispatch=WorkflowDispatch(inputs={
            "dry_run": WorkflowInput(type="boolean", default=False),
        }))
        data = yaml.safe_load(render(Workflow(name="x", on=on)))
        assert data[True]["workflow_dispatch"]["inputs"]["dry_run"] == {"default": False, "type": "boolean"}


class TestJobReferences:
    def test_job_value_resolves_to_key(self, ci_yaml):
        assert "  test:\n    name: test\n    runs-on: ubuntu-latest\n    needs: [build]\n" in ci_yaml

    def test_equal_job_value_resolves(self):
        build = run_job(name="build")
        wf = Workflow(name="x", jobs={"build": build, "test": run_job(needs=[run_job(name="build")])})
        assert "needs: [build]" in render(wf)

    def test_unknown_job_value(self):
        stray = run_job(name="stray")
        wf = Workflow(name="x", jobs={"test": run_job(needs=[stray])})
        with pytest.raises(UnknownJobReference) as exc:
            to_yaml(wf)
        assert exc.value.path == "jobs.test.needs[0]"
        assert exc.value.kind == "UnknownJobReference"

    def test_needs_entry_of_wrong_type(self):
        wf = Workflow(name="x", jobs={"test": run_job(needs=[42])})
        with pytest.raises(UnknownJobReference):
            to_yaml(wf)


class TestErrors:
    def test_step_with_uses_and_run(self):
        wf = Workflow(name="x", jobs={"a": run_job(Step(uses="actions/checkout@v4", run="make"))})
        with pytest.raises(InvalidStepShape) as exc:
            to_yaml(wf)
        assert exc.value.path == "jobs.a.steps[0]"

    def test_with_on_run_step(self):
        with pytest.raises(InvalidStepShape):
            to_yaml(Workflow(name="x", jobs={"a": run_job(Step(run="make", with_={"x": 1}))}))

    def test_unknown_step_shape(self):
        with pytest.raises(InvalidStepShape):
            to_yaml(Workflow(name="x", jobs={"a": run_job("make test")}))

    def test_reusable_workflow_job_with_steps(self):
        job = Job(uses="org/repo/.github/workflows/x.yml@main", steps=[Step(run="make")])
        with pytest.raises(InvalidStepShape):
            to_yaml(Workflow(name="x", jobs={"a": job}))

    def test_missing_runs_on(self):
        with pytest.raises(IncompleteRequired) as exc:
            to_yaml(Workflow(name="x", jobs={"a": Job(steps=[Step(run="make")])}))
        assert exc.value.path == "jobs.a.runs-on"

    def test_job_without_steps(self):
        with pytest.raises(IncompleteRequired):
            to_yaml(Workflow(name="x", jobs={"a": Job(runs_on="ubuntu-latest")}))

    def test_required_record_field(self):
        with pytest.raises(IncompleteRequired) as exc:
            to_yaml(Workflow(name="x", jobs={"a": run_job(environment=Environment(url="https://x"))}))
        assert exc.value.path == "jobs.a.environment.name"

    def test_schedule_needs_cron(self):
        with pytest.raises(IncompleteRequired):
            to_yaml(Workflow(name="x", on=Triggers(schedule=[Schedule()])))

    def test_unrenderable_value(self):
        wf = Workflow(name="x", env={"WHEN": object()})
        with pytest.raises(UnrenderableValue) as exc:
            to_yaml(wf)
        assert exc.value.path == "env.WHEN"

    @pytest.mark.parametrize("job_id", ["1st", "has space", "dot.ted", ""])
    def test_invalid_job_id(self, job_id):
        with pytest.raises(InvalidIdentifier):
            to_yaml(Workflow(name="x", jobs={job_id: run_job()}))

    def test_invalid_step_id(self):
        with pytest.raises(InvalidIdentifier):
            to_yaml(Workflow(name="x", jobs={"a": run_job(Step(id="my step", run="make"))}))

    def test_serialize_rejects_non_artifacts(self):
        with pytest.raises(UnrenderableValue):
            serialize({"name": "not a workflow"})

    def test_error_str_carries_location(self):
        wf = Workflow(name="x", jobs={"test": run_job(needs=["build", run_job(name="ghost")])})
        with pytest.raises(UnknownJobReference) as exc:
            to_yaml(wf)
        text = str(exc.value)
        assert text.startswith("UnknownJobReference: ")
        assert "jobs.test.needs[1]" in text
