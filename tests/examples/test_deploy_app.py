import pytest

from argcheck import Program, ValidationError
from examples.deploy_app import SAMPLE_ARGS, build_validators, run_demo, validate_args


def test_run_deploy_demo_coerces_sample_args():
    values = run_demo()
    assert values == {
        "replicas": 3,
        "cpu-limit": 1.5,
        "dry-run": True,
        "ports": [80, 443],
        "tags": ["web", "canary"],
        "region": "eu-west-1",
        "endpoint": "https://deploy.example.com",
    }


def test_deploy_option_table_is_well_formed():
    program = Program("deploy")
    validators = build_validators(program)
    assert set(validators) >= set(SAMPLE_ARGS)
    assert all(v.is_configured for v in validators.values())
    assert not program.has_fatal_errors


def test_validate_args_collects_errors():
    raw = dict(SAMPLE_ARGS, replicas="many", endpoint="ftp://files", verbose="1")
    values, errors = validate_args(raw, Program("deploy"))
    messages = {error.context["option"]: error.message for error in errors}
    assert messages == {
        "replicas": "Type (INT) validation failed",
        "endpoint": "Function validation failed",
    }
    assert values["verbose"] == "1"
    assert values["ports"] == [80, 443]


def test_run_demo_raises_first_error():
    with pytest.raises(ValidationError):
        run_demo({"dry-run": "perhaps"})
