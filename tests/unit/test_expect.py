import pytest

from pagecheck.core.expect import expect_contains, expect_not_contains, expect_truthy


def test_class_containment_is_per_token():
    expect_not_contains(["widget", "is-hidden"], "hidden")
    with pytest.raises(AssertionError, match="to contain 'hidden'"):
        expect_contains(["widget", "is-hidden"], "hidden")
    expect_contains(["widget", "hidden"], "hidden")


def test_expect_truthy_names_the_probe():
    with pytest.raises(AssertionError, match=r"expected isVisible\(\) to be truthy, received False"):
        expect_truthy(False, "isVisible()")
