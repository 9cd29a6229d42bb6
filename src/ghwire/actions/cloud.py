# actions/cloud.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import Action, SNAKE, as_input


@dataclass(frozen=True)
class AwsConfigureCredentials(Action):
    ref: ClassVar[str] = "aws-actions/configure-aws-credentials@v4"

    aws_region: str = ""
    role_to_assume: str = ""
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_session_token: str = ""
    web_identity_token_file: str = ""
    role_chaining: bool = False
    audience: str = ""
    http_proxy: str = ""
    role_duration_seconds: int = 0
    role_external_id: str = ""
    role_session_name: str = ""
    role_skip_session_tagging: bool = False
    inline_session_policy: str = ""
    managed_session_policies: str = ""
    output_credentials: bool = False
    mask_aws_account_id: bool = False
    unset_current_credentials: bool = False
    disable_retry: bool = False
    retry_max_attempts: int = 0
    special_characters_workaround: bool = False


@dataclass(frozen=True)
class GcpAuth(Action):
    ref: ClassVar[str] = "google-github-actions/auth@v2"
    input_style: ClassVar[str] = SNAKE

    project_id: str = ""
    workload_identity_provider: str = ""
    service_account: str = ""
    audience: str = ""
    credentials_json: str = ""
    create_credentials_file: bool = False
    export_environment_variables: bool = False
    token_format: str = ""
    delegates: str = ""
    cleanup_credentials: bool = False
    access_token_lifetime: str = ""
    access_token_scopes: str = ""
    access_token_subject: str = ""
    id_token_audience: str = ""
    id_token_include_email: bool = False


@dataclass(frozen=True)
class AzureLogin(Action):
    ref: ClassVar[str] = "azure/login@v2"

    creds: str = ""
    client_id: str = ""
    tenant_id: str = ""
    subscription_id: str = ""
    enable_az_ps_session: bool = field(default=False, metadata=as_input("enable-AzPSSession"))
    environment: str = ""
    allow_no_subscriptions: bool = False
    audience: str = ""
    auth_type: str = ""
