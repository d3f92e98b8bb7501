"""
Effect combinators: wrap a zero-argument computation with a
side-effect hook that runs on success, on failure or on both,
while the computation's value and exception pass through unchanged.

Architecture:
- run_with_* functions take the callback and the thunk
- build_* functions pre-bind the callback (partial application)
- *_async forms for coroutine thunks
- effectful() lifts a built wrapper into a decorator
- taps.log offers structlog callbacks
"""

# Core types
from ._types import Action, AsyncAction, AsyncThunk, AsyncWrapper, Outcome, Thunk, Wrapper

# Effects
from . import effect
from .effect import (
    # Sync
    run_with_error_effect,
    run_with_outcome_effect,
    run_with_success_effect,
    run_with_success_effect_mapped,
    build_error_effect,
    build_outcome_effect,
    build_success_effect,
    build_success_effect_mapped,
    # Async
    run_with_error_effect_async,
    run_with_outcome_effect_async,
    run_with_success_effect_async,
    run_with_success_effect_mapped_async,
    build_error_effect_async,
    build_outcome_effect_async,
    build_success_effect_async,
    build_success_effect_mapped_async,
)

# Decorators
from .lift import effectful, effectful_async

# Logging
from . import log
from .log import LogPolicy, log_error, log_outcome, log_success, logged

# Errors
from ._errors import AsyncCallbackError, EffectConfigError, TapsError

__all__ = (
    # Types
    "Action",
    "AsyncAction",
    "AsyncThunk",
    "AsyncWrapper",
    "Outcome",
    "Thunk",
    "Wrapper",
    # Effects module
    "effect",
    # Effects - sync
    "run_with_error_effect",
    "run_with_outcome_effect",
    "run_with_success_effect",
    "run_with_success_effect_mapped",
    "build_error_effect",
    "build_outcome_effect",
    "build_success_effect",
    "build_success_effect_mapped",
    # Effects - async
    "run_with_error_effect_async",
    "run_with_outcome_effect_async",
    "run_with_success_effect_async",
    "run_with_success_effect_mapped_async",
    "build_error_effect_async",
    "build_outcome_effect_async",
    "build_success_effect_async",
    "build_success_effect_mapped_async",
    # Decorators
    "effectful",
    "effectful_async",
    # Logging
    "log",
    "LogPolicy",
    "log_error",
    "log_outcome",
    "log_success",
    "logged",
    # Errors
    "AsyncCallbackError",
    "EffectConfigError",
    "TapsError",
)
