from .base import Action, KEBAB, SNAKE
from .core import Checkout, Cache, UploadArtifact, DownloadArtifact, GitHubScript
from .setup import (
    SetupPython, SetupNode, SetupGo, SetupJava, SetupDotnet, SetupRuby, RustToolchain, SetupTerraform,
)
from .docker import DockerLogin, SetupBuildx, DockerMetadata, BuildPush
from .security import (
    CodeQLInit, CodeQLAnalyze, UploadSarif, DependencyReview, Trivy, AttestBuildProvenance,
)
from .quality import Codecov, GolangciLint, PreCommit
from .release import GhRelease, CreatePullRequest, ConfigurePages, UploadPagesArtifact, DeployPages
from .cloud import AwsConfigureCredentials, GcpAuth, AzureLogin
from .repo import Labeler, Stale, FirstInteraction, Slack

__all__ = [
    "Action", "KEBAB", "SNAKE",
    "Checkout", "Cache", "UploadArtifact", "DownloadArtifact", "GitHubScript",
    "SetupPython", "SetupNode", "SetupGo", "SetupJava", "SetupDotnet", "SetupRuby",
    "RustToolchain", "SetupTerraform",
    "DockerLogin", "SetupBuildx", "DockerMetadata", "BuildPush",
    "CodeQLInit", "CodeQLAnalyze", "UploadSarif", "DependencyReview", "Trivy", "AttestBuildProvenance",
    "Codecov", "GolangciLint", "PreCommit",
    "GhRelease", "CreatePullRequest", "ConfigurePages", "UploadPagesArtifact", "DeployPages",
    "AwsConfigureCredentials", "GcpAuth", "AzureLogin",
    "Labeler", "Stale", "FirstInteraction", "Slack",
]


def catalog() -> dict:
    """action reference -> wrapper class, for every wrapper above."""
    out = {}
    for name in __all__:
        obj = globals()[name]
        if isinstance(obj, type) and issubclass(obj, Action) and obj.ref:
            out[obj.ref] = obj
    return out
