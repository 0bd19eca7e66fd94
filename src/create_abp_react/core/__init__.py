"""Core / service layer — validation and workflow orchestration.

Rules
-----
* No ``print()`` calls.
* No subprocess calls and no direct file-system access.
* No imports from ``cli`` or ``infra``.
"""

from create_abp_react.core.models import InvocationContext, WorkflowStep
from create_abp_react.core.protocols import ToolRunner, WorkflowReporter, Workspace
from create_abp_react.core.validation import ensure_target_available, validate_folder_name
from create_abp_react.core.workflow import ScaffoldWorkflow

__all__: list[str] = [
    "InvocationContext",
    "ScaffoldWorkflow",
    "ToolRunner",
    "WorkflowReporter",
    "WorkflowStep",
    "Workspace",
    "ensure_target_available",
    "validate_folder_name",
]
