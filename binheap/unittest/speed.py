"""
Heap speed tests are slow and hardware dependent, so they only run when the environment asks for them::

    SPEED_TESTS=ON SPEED_XTIME=2 pytest
"""
from unittest.case import skip
import os
from binheap.validation import check_option

SPEED_TESTS = check_option(
    "SPEED_TESTS", os.getenv("SPEED_TESTS") or "OFF", ["OFF", "ON"]
)

SPEED_XTIME = float(os.getenv("SPEED_XTIME", 1.5))
"""
Slack factor for slower machines.
"""


def speed_tests_on():
    return SPEED_TESTS == "ON"


def within_budget(runtime, nominal_runtime):
    """
    Whether ``runtime`` (in seconds) is acceptable for an operation expected to take ``nominal_runtime``.
    """
    return runtime < SPEED_XTIME * nominal_runtime


def speed_test(func):
    if speed_tests_on():
        return func
    return skip("Heap speed tests disabled (set SPEED_TESTS=ON).")(func)
