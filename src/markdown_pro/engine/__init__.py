"""Dispatch plumbing: key inputs, results, prompts and render scheduling."""

from .base import DispatchResult, EditorBus, EditorContext, KeyInput
from .prompts import (
    PROMPTS,
    NoParameters,
    ParameterKind,
    ParameterRequest,
    ScriptedParameters,
    ask,
)
from .scheduler import (
    DeferredScheduler,
    ImmediateScheduler,
    RenderScheduler,
)

__all__ = [
    "DispatchResult",
    "EditorBus",
    "EditorContext",
    "KeyInput",
    "PROMPTS",
    "NoParameters",
    "ParameterKind",
    "ParameterRequest",
    "ScriptedParameters",
    "ask",
    "DeferredScheduler",
    "ImmediateScheduler",
    "RenderScheduler",
]
