# actions/security.py
# Code scanning, supply chain and dependency checks.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import Action, SNAKE, as_input


@dataclass(frozen=True)
class CodeQLInit(Action):
    ref: ClassVar[str] = "github/codeql-action/init@v3"

    languages: str = ""
    queries: str = ""
    config_file: str = ""
    external_repository_token: str = ""
    tools: str = ""
    debug: bool = False
    ram: str = ""
    threads: str = ""
    build_mode: str = ""  # none | autobuild | manual


@dataclass(frozen=True)
class CodeQLAnalyze(Action):
    ref: ClassVar[str] = "github/codeql-action/analyze@v3"

    category: str = ""
    output: str = ""
    upload: bool = False
    upload_database: bool = False
    checkout_path: str = ""
    ram: str = ""
    threads: str = ""


@dataclass(frozen=True)
class UploadSarif(Action):
    ref: ClassVar[str] = "github/codeql-action/upload-sarif@v3"
    input_style: ClassVar[str] = SNAKE

    sarif_file: str = ""
    checkout_path: str = ""
    ref_: str = field(default="", metadata=as_input("ref"))
    sha: str = ""
    category: str = ""
    token: str = ""
    wait_for_processing: bool = field(default=False, metadata=as_input("wait-for-processing"))


@dataclass(frozen=True)
class DependencyReview(Action):
    ref: ClassVar[str] = "actions/dependency-review-action@v4"

    fail_on_severity: str = ""
    fail_on_scopes: str = ""
    allow_licenses: str = ""
    deny_licenses: str = ""
    allow_ghsas: str = ""
    config_file: str = ""
    base_ref: str = ""
    head_ref: str = ""
    comment_summary_in_pr: bool = False
    warn_only: bool = False
    license_check: bool = False
    vulnerability_check: bool = False
    retry_on_snapshot_warnings: bool = False


@dataclass(frozen=True)
class Trivy(Action):
    ref: ClassVar[str] = "aquasecurity/trivy-action@0.28.0"

    image_ref: str = ""
    scan_type: str = ""  # image | fs | repo | config
    format: str = ""
    severity: str = ""
    exit_code: int = 0
    ignore_unfixed: bool = False
    vuln_type: str = ""
    scanners: str = ""
    template: str = ""
    output: str = ""


@dataclass(frozen=True)
class AttestBuildProvenance(Action):
    ref: ClassVar[str] = "actions/attest-build-provenance@v1"

    subject_path: str = ""
    subject_digest: str = ""
    subject_name: str = ""
    subject_checksums: str = ""
    push_to_registry: bool = False
    create_storage_record: bool = False
    show_summary: bool = False
    github_token: str = ""
