import pytest

from tests.helpers.check_imports import FakeExpect, FakePage, InputFieldTestSuite, make_config


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def fake_expect():
    return FakeExpect()


@pytest.fixture
def make_suite(fake_page, fake_expect):
    def _make(**overrides):
        return InputFieldTestSuite(fake_page, config=make_config(**overrides), expect_factory=fake_expect)

    return _make


@pytest.fixture
def suite(make_suite):
    return make_suite()
