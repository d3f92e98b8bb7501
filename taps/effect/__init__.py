from .aio import (
    build_error_effect_async,
    build_outcome_effect_async,
    build_success_effect_async,
    build_success_effect_mapped_async,
    run_with_error_effect_async,
    run_with_outcome_effect_async,
    run_with_success_effect_async,
    run_with_success_effect_mapped_async,
)
from .build import (
    build_error_effect,
    build_outcome_effect,
    build_success_effect,
    build_success_effect_mapped,
)
from .run import (
    run_with_error_effect,
    run_with_outcome_effect,
    run_with_success_effect,
    run_with_success_effect_mapped,
)

__all__ = (
    # Sync
    "run_with_error_effect",
    "run_with_outcome_effect",
    "run_with_success_effect",
    "run_with_success_effect_mapped",
    # Sync builders
    "build_error_effect",
    "build_outcome_effect",
    "build_success_effect",
    "build_success_effect_mapped",
    # Async
    "run_with_error_effect_async",
    "run_with_outcome_effect_async",
    "run_with_success_effect_async",
    "run_with_success_effect_mapped_async",
    # Async builders
    "build_error_effect_async",
    "build_outcome_effect_async",
    "build_success_effect_async",
    "build_success_effect_mapped_async",
)
