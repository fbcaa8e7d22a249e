from __future__ import annotations

import pytest

from platform_common.kernel.enums import CourseMgmtStatus, Environment, ProgressStatus, Status
from platform_common.kernel.text import is_blank, is_email_valid


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_is_blank_true_for_missing_values(value):
    assert is_blank(value)


@pytest.mark.unit
def test_is_blank_false_for_text():
    assert not is_blank(" x ")


@pytest.mark.unit
@pytest.mark.parametrize(
    "email",
    ["user@example.com", "first+tag.last@mail.example.org", "a_b-c@sub-domain.co.in"],
)
def test_is_email_valid_accepts_common_addresses(email):
    assert is_email_valid(email)


@pytest.mark.unit
@pytest.mark.parametrize(
    "email",
    [None, "", "plainaddress", "user@", "@example.com", "user@example", "user@example.c", "us er@example.com"],
)
def test_is_email_valid_rejects_malformed_addresses(email):
    assert not is_email_valid(email)


@pytest.mark.unit
def test_enum_values_are_stable():
    assert Environment.PROD.value == 3
    assert ProgressStatus.COMPLETED == 2
    assert Status.ACTIVE.value is True
    assert CourseMgmtStatus("live") is CourseMgmtStatus.LIVE
