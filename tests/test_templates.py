"""Issue forms, discussion forms and pull request templates."""

import pytest
import yaml

from ghwire.errors import IncompleteRequired, UnrenderableValue
from ghwire.serialize import (
    discussion_template_to_yaml,
    issue_template_to_yaml,
    pr_template_to_markdown,
    serialize,
)
from ghwire.templates import (
    CheckboxOption,
    Checkboxes,
    DiscussionTemplate,
    Dropdown,
    Input,
    IssueTemplate,
    Markdown,
    PRTemplate,
    Textarea,
)


def bug_report(**fields) -> IssueTemplate:
    defaults = dict(
        name="Bug report",
        description="File a bug",
        body=[Textarea(label="What happened?", id="what", required=True)],
    )
    defaults.update(fields)
    return IssueTemplate(**defaults)


class TestIssueTemplate:
    def test_top_level_order(self):
        out = issue_template_to_yaml(bug_report(title="[Bug]: ", labels=["bug"])).decode("utf-8")
        keys = [line.split(":")[0] for line in out.splitlines() if line and not line.startswith(" ")]
        assert keys == ["name", "description", "title", "labels", "body"]

    def test_elements_are_nested(self):
        template = bug_report(body=[
            Markdown(value="Thanks!"),
            Input(label="Version", id="version", placeholder="1.0"),
            Textarea(label="Logs", id="logs", render="shell"),
            Dropdown(label="OS", id="os", options=["Linux", "macOS"], multiple=True, required=True),
            Checkboxes(label="Terms", id="terms", options=[
                CheckboxOption(label="I searched existing issues", required=True),
            ]),
        ])
        body = yaml.safe_load(issue_template_to_yaml(template))["body"]
        assert body[0] == {"type": "markdown", "attributes": {"value": "Thanks!"}}
        assert body[1] == {"type": "input", "id": "version",
                           "attributes": {"label": "Version", "placeholder": "1.0"}}
        assert body[2]["attributes"]["render"] == "shell"
        assert body[3] == {
            "type": "dropdown", "id": "os",
            "attributes": {"label": "OS", "multiple": True, "options": ["Linux", "macOS"]},
            "validations": {"required": True},
        }
        assert body[4]["attributes"]["options"] == [{"label": "I searched existing issues", "required": True}]

    def test_element_order_within_element(self):
        out = issue_template_to_yaml(bug_report()).decode("utf-8")
        assert out.index("- type: textarea") < out.index("id: what") < out.index("attributes:") \
            < out.index("validations:")

    def test_missing_name(self):
        with pytest.raises(IncompleteRequired) as exc:
            issue_template_to_yaml(bug_report(name=""))
        assert exc.value.path == "name"

    def test_empty_body(self):
        with pytest.raises(IncompleteRequired):
            issue_template_to_yaml(bug_report(body=[]))

    def test_element_missing_label(self):
        with pytest.raises(IncompleteRequired) as exc:
            issue_template_to_yaml(bug_report(body=[Input(id="x")]))
        assert exc.value.path == "body[0].attributes.label"

    def test_dropdown_needs_options(self):
        with pytest.raises(IncompleteRequired):
            issue_template_to_yaml(bug_report(body=[Dropdown(label="OS")]))

    def test_non_element_in_body(self):
        with pytest.raises(UnrenderableValue):
            issue_template_to_yaml(bug_report(body=[{"type": "input"}]))


class TestDiscussionTemplate:
    def test_render(self):
        template = DiscussionTemplate(
            title="[Idea] ",
            labels=["idea"],
            body=[Textarea(label="Describe the idea", id="idea")],
        )
        data = yaml.safe_load(discussion_template_to_yaml(template))
        assert data == {
            "title": "[Idea] ",
            "labels": ["idea"],
            "body": [{"type": "textarea", "id": "idea", "attributes": {"label": "Describe the idea"}}],
        }
        assert serialize(template) == discussion_template_to_yaml(template)

    def test_body_required(self):
        with pytest.raises(IncompleteRequired):
            discussion_template_to_yaml(DiscussionTemplate(title="x"))


class TestPRTemplate:
    def test_content_passes_through(self):
        content = "## Summary\n\n- [ ] Tests added\n"
        assert pr_template_to_markdown(PRTemplate(content=content)) == content.encode("utf-8")

    @pytest.mark.parametrize("name,filename", [
        ("", "PULL_REQUEST_TEMPLATE.md"),
        ("default", "PULL_REQUEST_TEMPLATE.md"),
        ("release", "PULL_REQUEST_TEMPLATE/release.md"),
    ])
    def test_filename(self, name, filename):
        assert PRTemplate(name=name).filename() == filename
