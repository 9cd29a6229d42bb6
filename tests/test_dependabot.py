"""Dependabot configuration output."""

import pytest
import yaml

from ghwire.dependabot import (
    DAILY,
    WEEKLY,
    CommitMessage,
    Dependabot,
    Group,
    Ignore,
    Registry,
    Schedule,
    Update,
)
from ghwire.errors import IncompleteRequired
from ghwire.serialize import dependabot_to_yaml, serialize


def render(config: Dependabot) -> str:
    return dependabot_to_yaml(config).decode("utf-8")


def pip_update(**fields) -> Update:
    return Update(package_ecosystem="pip", directory="/", schedule=Schedule(interval=WEEKLY), **fields)


class TestDependabot:
    def test_registry_with_all_fields(self):
        config = Dependabot(
            registries={
                "npm-private": Registry(
                    type="npm-registry",
                    url="https://npm.example.com",
                    username="user",
                    password="${{ secrets.NPM_PASSWORD }}",
                    token="${{ secrets.NPM_TOKEN }}",
                    key="${{ secrets.NPM_KEY }}",
                    organization="my-org",
                    replaces_base=True,
                ),
            },
            updates=[pip_update()],
        )
        data = yaml.safe_load(render(config))
        entry = data["registries"]["npm-private"]
        assert list(entry) == [
            "type", "url", "username", "password", "token", "key", "organization", "replaces-base",
        ]
        assert entry["replaces-base"] is True
        assert entry["organization"] == "my-org"

    def test_version_comes_first_and_registries_before_updates(self):
        out = render(Dependabot(registries={"r": Registry(type="npm-registry", url="https://x")},
                                updates=[pip_update()]))
        assert out.startswith("version: 2\n")
        assert out.index("registries:") < out.index("updates:")

    def test_update_fields(self):
        update = pip_update(
            labels=["deps"],
            open_pull_requests_limit=5,
            ignore=[Ignore(dependency_name="django", update_types=["version-update:semver-major"])],
            groups={"dev": Group(dependency_type="development", patterns=["*"])},
            commit_message=CommitMessage(prefix="deps", include="scope"),
        )
        data = yaml.safe_load(render(Dependabot(updates=[update])))["updates"][0]
        assert data["package-ecosystem"] == "pip"
        assert data["schedule"] == {"interval": "weekly"}
        assert data["open-pull-requests-limit"] == 5
        assert data["ignore"] == [{"dependency-name": "django", "update-types": ["version-update:semver-major"]}]
        assert data["groups"] == {"dev": {"dependency-type": "development", "patterns": ["*"]}}
        assert data["commit-message"] == {"prefix": "deps", "include": "scope"}

    def test_directories_instead_of_directory(self):
        update = Update(package_ecosystem="npm", directories=["/a", "/b"], schedule=Schedule(interval=DAILY))
        data = yaml.safe_load(render(Dependabot(updates=[update])))
        assert data["updates"][0]["directories"] == ["/a", "/b"]
        assert "directory" not in data["updates"][0]

    def test_missing_directory(self):
        update = Update(package_ecosystem="npm", schedule=Schedule(interval=DAILY))
        with pytest.raises(IncompleteRequired) as exc:
            render(Dependabot(updates=[update]))
        assert exc.value.path == "updates[0].directory"

    def test_missing_schedule(self):
        with pytest.raises(IncompleteRequired) as exc:
            render(Dependabot(updates=[Update(package_ecosystem="npm", directory="/")]))
        assert exc.value.path == "updates[0].schedule"

    def test_missing_ecosystem(self):
        with pytest.raises(IncompleteRequired):
            render(Dependabot(updates=[Update(directory="/", schedule=Schedule(interval=DAILY))]))

    def test_registry_needs_type(self):
        with pytest.raises(IncompleteRequired) as exc:
            render(Dependabot(registries={"r": Registry(url="https://x")}))
        assert exc.value.path == "registries.r.type"

    def test_serialize_dispatch(self):
        config = Dependabot(updates=[pip_update()])
        assert serialize(config) == dependabot_to_yaml(config)
