# actions/docker.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import Action


@dataclass(frozen=True)
class DockerLogin(Action):
    ref: ClassVar[str] = "docker/login-action@v3"

    registry: str = ""
    username: str = ""
    password: str = ""
    ecr: str = ""  # "auto" | "true" | "false"
    logout: bool = False


@dataclass(frozen=True)
class SetupBuildx(Action):
    ref: ClassVar[str] = "docker/setup-buildx-action@v3"

    version: str = ""
    driver: str = ""
    driver_opts: str = ""
    buildkitd_flags: str = ""
    install: bool = False
    use: bool = False
    endpoint: str = ""
    platforms: str = ""
    config: str = ""
    config_inline: str = ""
    append: str = ""
    cleanup: bool = False


@dataclass(frozen=True)
class DockerMetadata(Action):
    """Derives tags and labels; read them back via the step's `tags`/`labels` outputs."""
    ref: ClassVar[str] = "docker/metadata-action@v5"

    context: str = ""
    images: str = ""
    tags: str = ""
    flavor: str = ""
    labels: str = ""
    annotations: str = ""
    sep_tags: str = ""
    sep_labels: str = ""
    sep_annotations: str = ""
    bake_target: str = ""


@dataclass(frozen=True)
class BuildPush(Action):
    ref: ClassVar[str] = "docker/build-push-action@v6"

    context: str = ""
    file: str = ""
    push: bool = False
    load: bool = False
    tags: str = ""
    build_args: str = ""
    platforms: str = ""
    cache_from: str = ""
    cache_to: str = ""
    target: str = ""
    no_cache: bool = False
    pull: bool = False
    secrets: str = ""
    labels: str = ""
    outputs: str = ""
    provenance: str = ""
    sbom: str = ""
