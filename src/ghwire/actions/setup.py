# actions/setup.py
# Toolchain installers.
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import Action, SNAKE


@dataclass(frozen=True)
class SetupPython(Action):
    ref: ClassVar[str] = "actions/setup-python@v5"

    python_version: str = ""
    python_version_file: str = ""
    cache: str = ""  # pip | pipenv | poetry
    architecture: str = ""
    check_latest: bool = False
    token: str = ""
    cache_dependency_path: str = ""
    update_environment: bool = False
    allow_prereleases: bool = False


@dataclass(frozen=True)
class SetupNode(Action):
    ref: ClassVar[str] = "actions/setup-node@v4"

    node_version: str = ""
    node_version_file: str = ""
    architecture: str = ""
    check_latest: bool = False
    registry_url: str = ""
    scope: str = ""
    token: str = ""
    cache: str = ""  # npm | yarn | pnpm
    cache_dependency_path: str = ""
    always_auth: bool = False


@dataclass(frozen=True)
class SetupGo(Action):
    ref: ClassVar[str] = "actions/setup-go@v5"

    go_version: str = ""
    go_version_file: str = ""
    check_latest: bool = False
    token: str = ""
    cache: bool = False
    cache_dependency_path: str = ""
    architecture: str = ""


@dataclass(frozen=True)
class SetupJava(Action):
    ref: ClassVar[str] = "actions/setup-java@v4"

    java_version: str = ""
    distribution: str = ""  # temurin | zulu | corretto | ...
    java_version_file: str = ""
    java_package: str = ""
    architecture: str = ""
    jdk_file: str = ""
    check_latest: bool = False
    server_id: str = ""
    server_username: str = ""
    server_password: str = ""
    settings_path: str = ""
    overwrite_settings: bool = False
    gpg_private_key: str = ""
    gpg_passphrase: str = ""
    cache: str = ""
    cache_dependency_path: str = ""
    token: str = ""
    mvn_toolchain_id: str = ""
    mvn_toolchain_vendor: str = ""


@dataclass(frozen=True)
class SetupDotnet(Action):
    ref: ClassVar[str] = "actions/setup-dotnet@v4"

    dotnet_version: str = ""
    dotnet_quality: str = ""
    global_json_file: str = ""
    include_prerelease: bool = False
    source: str = ""
    token: str = ""
    config_file: str = ""
    cache: bool = False
    cache_dependency_path: str = ""


@dataclass(frozen=True)
class SetupRuby(Action):
    ref: ClassVar[str] = "ruby/setup-ruby@v1"

    ruby_version: str = ""
    ruby_version_file: str = ""
    bundler: str = ""
    bundler_version: str = ""
    bundler_cache: bool = False
    cache_version: str = ""
    working_directory: str = ""
    rubygems: str = ""
    bundler_no_lock: bool = False


@dataclass(frozen=True)
class RustToolchain(Action):
    ref: ClassVar[str] = "dtolnay/rust-toolchain@stable"

    toolchain: str = ""
    targets: str = ""
    components: str = ""
    profile: str = ""


@dataclass(frozen=True)
class SetupTerraform(Action):
    ref: ClassVar[str] = "hashicorp/setup-terraform@v3"
    input_style: ClassVar[str] = SNAKE

    cli_config_credentials_hostname: str = ""
    cli_config_credentials_token: str = ""
    terraform_version: str = ""
    terraform_wrapper: bool = False
