"""
Deploy example validating a set of raw option strings.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from argcheck import Program, ProgramConfig, ValidationError, Validator
from argcheck.utils.logging import set_correlation_id

from .options import OPTIONS

SAMPLE_ARGS = {
    "replicas": "3",
    "cpu-limit": "1.5",
    "dry-run": "yes",
    "ports": "80,443",
    "tags": "web,canary",
    "region": "eu-west-1",
    "endpoint": "https://deploy.example.com",
}


def build_validators(program: Program) -> Dict[str, Validator]:
    return {name: Validator(spec, program, option=name) for name, spec in OPTIONS.items()}


def validate_args(
    raw: Mapping[str, Any], program: Program | None = None
) -> Tuple[Dict[str, Any], List[ValidationError]]:
    program = program or Program("deploy", ProgramConfig.from_env())
    set_correlation_id()
    validators = build_validators(program)
    values: Dict[str, Any] = {}
    errors: List[ValidationError] = []
    for name, value in raw.items():
        validator = validators.get(name)
        if validator is None:
            values[name] = value
            continue
        try:
            values[name] = validator.validate(value)
        except ValidationError as exc:
            errors.append(exc)
    return values, errors


def run_demo(raw: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    values, errors = validate_args(SAMPLE_ARGS if raw is None else raw)
    if errors:
        raise errors[0]
    return values


if __name__ == "__main__":
    for key, value in run_demo().items():
        print(f"{key} = {value!r}")
