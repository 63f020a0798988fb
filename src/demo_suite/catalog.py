"""expected outcome of every bundled demo case"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

DEMOS_DIR = Path(__file__).parent / "demos"


class Outcome(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


class UnknownDemoError(KeyError):
    """raised when a demo module name is not in the catalog"""


@dataclass(frozen=True)
class DemoCase:
    module: str
    name: str
    outcome: Outcome
    reason: Optional[str] = None

    @property
    def node_id(self) -> str:
        return f"{self.module}.py::{self.name}"


DEMO_CASES: List[DemoCase] = [
    DemoCase("test_demo", "test_addition", Outcome.PASSED),
    DemoCase("test_demo", "test_string_length", Outcome.PASSED),
    DemoCase("test_demo", "test_not_null", Outcome.PASSED),
    DemoCase("test_demo", "test_failing", Outcome.FAILED),
    DemoCase(
        "test_demo", "test_skipped", Outcome.SKIPPED, "Demonstrating skipped test"
    ),
    DemoCase(
        "test_skipped_demo",
        "test_disabled_with_reason",
        Outcome.SKIPPED,
        "Waiting for the prime minister",
    ),
    DemoCase(
        "test_skipped_demo",
        "test_skipped_by_assumption",
        Outcome.SKIPPED,
        "Only runs on Fridays",
    ),
] + [
    DemoCase("test_parameterized_demo", f"test_is_prime[{n}]", Outcome.PASSED)
    for n in range(1, 7)
]


def modules() -> List[str]:
    """demo module names in catalog order"""
    return list(dict.fromkeys(case.module for case in DEMO_CASES))


def cases_for(module: Optional[str] = None) -> List[DemoCase]:
    """get catalog entries, optionally for a single module

    Args:
        module: demo module name, e.g. "test_demo"; None for all

    Returns:
        matching cases in catalog order

    Raises:
        UnknownDemoError: if module is not a bundled demo
    """
    if module is None:
        return list(DEMO_CASES)

    cases = [case for case in DEMO_CASES if case.module == module]
    if not cases:
        raise UnknownDemoError(module)
    return cases


def expected_counts(module: Optional[str] = None) -> Dict[str, int]:
    """count expected outcomes, keyed the way pytest names them"""
    counts = Counter(case.outcome.value for case in cases_for(module))
    return {outcome.value: counts.get(outcome.value, 0) for outcome in Outcome}


def demo_path(module: Optional[str] = None) -> Path:
    """path to the demo package, or to one demo module file"""
    if module is None:
        return DEMOS_DIR

    if module not in modules():
        raise UnknownDemoError(module)
    return DEMOS_DIR / f"{module}.py"
