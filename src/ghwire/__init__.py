from .dsl import job, sh, uses, matrix, workflow, wf, JobBuilder, build
from .model import Job, Step, Workflow, Strategy, Matrix, Permissions
from .triggers import Triggers, Push, PullRequest, Schedule, WorkflowDispatch
from .expressions import Expression
from .serialize import serialize, to_yaml
from .errors import GhwireError

__all__ = [
    "job", "sh", "uses", "matrix", "workflow", "wf", "JobBuilder", "build",
    "Job", "Step", "Workflow", "Strategy", "Matrix", "Permissions",
    "Triggers", "Push", "PullRequest", "Schedule", "WorkflowDispatch",
    "Expression", "serialize", "to_yaml", "GhwireError",
]
