"""
skip demos: static marker and runtime assumption
"""

import pytest


def assume(condition, message):
    """skip the calling test unless condition holds"""
    if not condition:
        pytest.skip(message)


@pytest.mark.skip(reason="Waiting for the prime minister")
def test_disabled_with_reason():
    assert False


def test_skipped_by_assumption():
    assume(False, "Only runs on Fridays")
