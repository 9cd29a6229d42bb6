# ghwire_workflow.py
# Declarations for ghwire's own repository: CI, Dependabot, a bug report form and CODEOWNERS
from __future__ import annotations

from ghwire.actions import Checkout, SetupPython
from ghwire.codeowners import Codeowners, Rule
from ghwire.dependabot import WEEKLY, Dependabot, Schedule as UpdateSchedule, Update
from ghwire.dsl import job, matrix, sh, uses, wf
from ghwire.expressions import matrix as m
from ghwire.model import READ, Permissions
from ghwire.templates import Input, IssueTemplate, Markdown, Textarea
from ghwire.triggers import PullRequest, Push, Triggers


def declarations():
    lint = job(
        "lint",
        uses(Checkout()),
        uses(SetupPython(python_version="3.12", cache="pip")),
        sh("Install", "pip install ruff"),
        sh("Ruff check", "ruff check ."),
    )

    test = job(
        "test",
        uses(Checkout()),
        uses(SetupPython(python_version=m.python, cache="pip")),
        sh("Install package", "pip install -e .[test]"),
        sh("Run pytest", "pytest -q"),
        needs=[lint],
        strategy=matrix(python=["3.10", "3.11", "3.12"]),
    )

    return {
        "ci": wf(
            "CI",
            lint,
            test,
            on=Triggers(push=Push(branches=["main"]), pull_request=PullRequest()),
            permissions=Permissions(contents=READ),
        ),
        "dependabot": Dependabot(updates=[
            Update(package_ecosystem="pip", directory="/", schedule=UpdateSchedule(interval=WEEKLY)),
            Update(package_ecosystem="github-actions", directory="/", schedule=UpdateSchedule(interval=WEEKLY)),
        ]),
        "bug_report": IssueTemplate(
            name="Bug report",
            description="Something generated the wrong file",
            labels=["bug"],
            body=[
                Markdown(value="Thanks for taking the time to report this."),
                Textarea(label="Declaration", id="declaration", render="python", required=True),
                Textarea(label="Generated output", id="output", render="yaml"),
                Input(label="ghwire version", id="version"),
            ],
        ),
        "codeowners": Codeowners(rules=[
            Rule("*", ["@ghwire/maintainers"]),
            Rule("src/ghwire/serialize/", ["@ghwire/serializer"], comment="YAML output"),
        ]),
    }
