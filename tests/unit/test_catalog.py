"""
unit tests for the demo catalog
"""

import pytest

from demo_suite.catalog import (
    DEMO_CASES,
    DEMOS_DIR,
    DemoCase,
    Outcome,
    UnknownDemoError,
    cases_for,
    demo_path,
    expected_counts,
    modules,
)


def test_catalog_size():
    """five basic cases, two skip demos, six parameterized cases"""
    assert len(DEMO_CASES) == 13


def test_modules_in_catalog_order():
    """module names are unique and ordered"""
    assert modules() == [
        "test_demo",
        "test_skipped_demo",
        "test_parameterized_demo",
    ]


def test_expected_counts_all():
    """full run expectations"""
    assert expected_counts() == {"passed": 9, "failed": 1, "skipped": 3}


def test_expected_counts_basic_module():
    """basic demo has one of each non-pass outcome"""
    assert expected_counts("test_demo") == {"passed": 3, "failed": 1, "skipped": 1}


def test_expected_counts_includes_zero():
    """outcomes with no cases still appear"""
    counts = expected_counts("test_parameterized_demo")
    assert counts == {"passed": 6, "failed": 0, "skipped": 0}


def test_only_failure_is_null_check():
    """exactly one case fails on purpose"""
    failed = [case for case in DEMO_CASES if case.outcome is Outcome.FAILED]
    assert [case.name for case in failed] == ["test_failing"]


def test_skipped_cases_have_reasons():
    """every skip carries the reason pytest will report"""
    for case in DEMO_CASES:
        if case.outcome is Outcome.SKIPPED:
            assert case.reason


def test_cases_for_filters_module():
    """filtering keeps only the requested module"""
    cases = cases_for("test_skipped_demo")
    assert {case.name for case in cases} == {
        "test_disabled_with_reason",
        "test_skipped_by_assumption",
    }


def test_cases_for_returns_copy():
    """callers cannot mutate the catalog"""
    cases = cases_for()
    cases.clear()
    assert len(DEMO_CASES) == 13


def test_cases_for_unknown_module():
    """unknown module raises a KeyError subclass"""
    with pytest.raises(UnknownDemoError):
        cases_for("test_missing")
    with pytest.raises(KeyError):
        cases_for("test_missing")


def test_node_id():
    """node id matches pytest's file::name form"""
    case = DemoCase("test_demo", "test_addition", Outcome.PASSED)
    assert case.node_id == "test_demo.py::test_addition"


def test_parameterized_node_ids():
    """parametrized ids use the value"""
    names = [case.name for case in cases_for("test_parameterized_demo")]
    assert names == [f"test_is_prime[{n}]" for n in range(1, 7)]


def test_demo_path_package():
    """no module gives the bundled demo package"""
    assert demo_path() == DEMOS_DIR
    assert (DEMOS_DIR / "__init__.py").exists()


@pytest.mark.parametrize("module", modules())
def test_demo_path_module_exists(module):
    """every catalogued module ships with the package"""
    path = demo_path(module)
    assert path.name == f"{module}.py"
    assert path.exists()


def test_demo_path_unknown_module():
    """unknown module raises"""
    with pytest.raises(UnknownDemoError):
        demo_path("test_missing")


def test_outcome_values():
    """outcome values match pytest's names"""
    assert [outcome.value for outcome in Outcome] == ["passed", "failed", "skipped"]
