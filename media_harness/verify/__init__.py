"""Verification of remote resource listings against expectations.

Functions:
    verify_list_result_contains: Identity-based subset check with field delegates
    approx_equal: Skew-tolerant timestamp equality
    assert_date_approx_equal: Assertion form of approx_equal
"""

from __future__ import annotations

from .errors import AssertionFailure
from .fields import InfoFieldVerifier
from .listdiff import verify_list_result_contains
from .timecompare import DateTolerance, approx_equal, assert_date_approx_equal

__all__ = [
    "AssertionFailure",
    "DateTolerance",
    "InfoFieldVerifier",
    "approx_equal",
    "assert_date_approx_equal",
    "verify_list_result_contains",
]
