from .demo import (  # noqa: F401
    SAMPLE_ARGS,
    build_validators,
    run_demo,
    validate_args,
)

__all__ = [
    "SAMPLE_ARGS",
    "build_validators",
    "validate_args",
    "run_demo",
]
