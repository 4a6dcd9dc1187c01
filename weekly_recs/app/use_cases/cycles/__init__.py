"""
Weekly Cycle Use Cases

Opening, submissions, closing and compiling of the weekly window.
"""

from .accept_submission_use_case import AcceptSubmissionUseCase
from .cleanup_old_data_use_case import CleanupOldDataUseCase
from .close_cycle_use_case import CloseCycleUseCase
from .cycle_compiler import CycleCompiler
from .dtos import (
    CleanupResponse,
    CompileCycleResponse,
    MemberSummary,
    OpenCycleResponse,
    SendRemindersResponse,
    SubmissionPayload,
    SubmissionResponse,
)
from .manual_compile_use_case import ManualCompileUseCase
from .open_cycle_use_case import OpenCycleUseCase
from .send_reminders_use_case import SendRemindersUseCase

__all__ = [
    "OpenCycleUseCase",
    "AcceptSubmissionUseCase",
    "CloseCycleUseCase",
    "ManualCompileUseCase",
    "SendRemindersUseCase",
    "CleanupOldDataUseCase",
    "CycleCompiler",
    "SubmissionPayload",
    "MemberSummary",
    "OpenCycleResponse",
    "SubmissionResponse",
    "CompileCycleResponse",
    "SendRemindersResponse",
    "CleanupResponse",
]
