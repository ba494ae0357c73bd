"""Data models for snipit backend."""

from snipit_backend.models.invocation import (
    Failure,
    FailureKind,
    InvocationOutcome,
    InvocationRequest,
    LaunchStrategy,
    Success,
    decode_lossy,
)
from snipit_backend.models.model_group import ModelGroup

__all__ = [
    "Failure",
    "FailureKind",
    "InvocationOutcome",
    "InvocationRequest",
    "LaunchStrategy",
    "ModelGroup",
    "Success",
    "decode_lossy",
]
