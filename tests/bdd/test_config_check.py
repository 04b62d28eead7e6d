"""Behaviour tests for ``siteconfig check`` and include resolution.

These scenarios write a site declaration into ``tmp_path``, run the CLI
commands a build pipeline runs before rendering, and verify that valid
declarations pass, that invalid ones halt with every issue listed, and that
relative scripts are resolved under the configured base URL.

Usage
-----
Run ``pytest tests/bdd/test_config_check.py -v`` or filter with
``pytest -k config_check``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from pytest_bdd import given, scenarios, then, when

from docsite_config import cli
from docsite_config.config import load_site_config

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "config_check.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


def _write_declaration(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "siteConfig.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


@given("a site declaration with a single search slot")
def given_valid_declaration(tmp_path: Path, scenario_state: ScenarioState) -> None:
    scenario_state["config_path"] = _write_declaration(
        tmp_path,
        """
        title: PyTorch-DP
        url: https://facebookresearch.github.io/pytorch-dp
        baseUrl: /
        headerLinks:
          - doc: introduction
            label: Getting Started
          - href: https://github.com/facebookresearch/pytorch-dp
            label: GitHub
          - search: true
        """,
    )


@given("a site declaration with two search slots and a relative base URL")
def given_invalid_declaration(tmp_path: Path, scenario_state: ScenarioState) -> None:
    scenario_state["config_path"] = _write_declaration(
        tmp_path,
        """
        title: PyTorch-DP
        url: https://facebookresearch.github.io/pytorch-dp
        baseUrl: pytorch-dp
        headerLinks:
          - search: true
          - doc: introduction
            label: Getting Started
          - search: true
        """,
    )


@given("a site declaration served from a sub-path")
def given_subpath_declaration(tmp_path: Path, scenario_state: ScenarioState) -> None:
    scenario_state["config_path"] = _write_declaration(
        tmp_path,
        """
        title: PyTorch-DP
        url: https://facebookresearch.github.io
        baseUrl: /pytorch-dp/
        scripts:
          - https://buttons.github.io/buttons.js
          - js/code_block_buttons.js
          - js/mathjax.js
        """,
    )


@when("I check the declaration")
def when_check(
    scenario_state: ScenarioState, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = 0
    try:
        cli.check(config=scenario_state["config_path"])
    except SystemExit as exc:
        exit_code = int(exc.code or 0)
    scenario_state["exit_code"] = exit_code
    scenario_state["output"] = capsys.readouterr().out


@when("I resolve the configured scripts")
def when_resolve(scenario_state: ScenarioState) -> None:
    config = load_site_config(scenario_state["config_path"])
    scenario_state["resolved"] = config.resolved_scripts()


@then("the check succeeds and names the site")
def then_check_succeeds(scenario_state: ScenarioState) -> None:
    assert scenario_state["exit_code"] == 0
    assert scenario_state["output"].strip() == "ok: PyTorch-DP"


@then("the check fails listing both problems")
def then_check_fails(scenario_state: ScenarioState) -> None:
    assert scenario_state["exit_code"] == 1
    output: str = scenario_state["output"]
    assert "2 problem(s)" in output
    assert "baseUrl: PatternMismatch:" in output
    assert "headerLinks[2]: DuplicateSlot:" in output


@then("relative scripts are prefixed with the base URL")
def then_scripts_prefixed(scenario_state: ScenarioState) -> None:
    assert scenario_state["resolved"] == [
        "https://buttons.github.io/buttons.js",
        "/pytorch-dp/js/code_block_buttons.js",
        "/pytorch-dp/js/mathjax.js",
    ]
