"""Tests for Helm version detection."""

import subprocess
from unittest.mock import patch

import pytest

from helm_oci.core.helm.real import RealHelm

RUN = "helm_oci.core.helm.real.subprocess.run"


@pytest.mark.parametrize(
    ("stdout", "expected"),
    [
        ("v3.14.2+gc309b6f\n", "v3"),
        ("v4.0.0+g1234567\n", "v4"),
        ("v2.17.0\n", "v2"),
        ("garbage\n", None),
    ],
)
def test_major_version_is_extracted(stdout: str, expected: str | None) -> None:
    completed = subprocess.CompletedProcess(["helm"], 0, stdout=stdout, stderr="")

    with patch(RUN, return_value=completed) as mock_run:
        assert RealHelm().get_version() == expected

    assert mock_run.call_args.args[0] == ["helm", "version", "--short"]


def test_missing_helm_returns_none() -> None:
    with patch(RUN, side_effect=FileNotFoundError()):
        assert RealHelm().get_version() is None


def test_failing_helm_returns_none() -> None:
    completed = subprocess.CompletedProcess(["helm"], 1, stdout="v3.14.2", stderr="boom")

    with patch(RUN, return_value=completed):
        assert RealHelm().get_version() is None
