# actions/core.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from .base import Action, as_input


@dataclass(frozen=True)
class Checkout(Action):
    ref: ClassVar[str] = "actions/checkout@v4"

    repository: str = ""
    ref_: str = field(default="", metadata=as_input("ref"))  # branch, tag or SHA to check out
    token: str = ""
    ssh_key: str = ""
    ssh_known_hosts: str = ""
    ssh_strict: bool = False
    persist_credentials: bool = False
    path: str = ""
    clean: bool = False
    filter: str = ""
    sparse_checkout: str = ""
    sparse_checkout_cone_mode: bool = False
    fetch_depth: Optional[int] = field(default=None, metadata={"omit": "none"})  # 0 = full history
    fetch_tags: bool = False
    show_progress: bool = False
    lfs: bool = False
    submodules: str = ""
    set_safe_directory: bool = False
    github_server_url: str = ""


@dataclass(frozen=True)
class Cache(Action):
    ref: ClassVar[str] = "actions/cache@v4"

    path: str = ""
    key: str = ""
    restore_keys: str = ""
    upload_chunk_size: int = 0
    enable_cross_os_archive: bool = field(default=False, metadata=as_input("enableCrossOsArchive"))
    fail_on_cache_miss: bool = False
    lookup_only: bool = False
    save_always: bool = False


@dataclass(frozen=True)
class UploadArtifact(Action):
    ref: ClassVar[str] = "actions/upload-artifact@v4"

    name: str = ""
    path: str = ""
    if_no_files_found: str = ""  # warn | error | ignore
    retention_days: int = 0
    compression_level: int = 0
    overwrite: bool = False
    include_hidden_files: bool = False


@dataclass(frozen=True)
class DownloadArtifact(Action):
    ref: ClassVar[str] = "actions/download-artifact@v4"

    name: str = ""
    path: str = ""
    pattern: str = ""
    merge_multiple: bool = False
    github_token: str = ""
    repository: str = ""
    run_id: str = ""


@dataclass(frozen=True)
class GitHubScript(Action):
    ref: ClassVar[str] = "actions/github-script@v7"

    script: str = ""
    github_token: str = ""
    debug: bool = False
    user_agent: str = ""
    previews: str = ""
    result_encoding: str = ""
    retries: int = 0
    retry_exempt_status_codes: str = ""
