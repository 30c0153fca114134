import pytest

from tests.helpers.check_imports import FieldConfigError, outcome_for
from tests.helpers.fakes import number_input


def test_number_input_clamps_and_steps(suite, fake_page):
    element = fake_page.add(
        type="number",
        attributes={"min": "0", "max": "10", "step": "1"},
        sanitize=number_input(0, 10),
    )

    report = suite.number_input(element, min=0, max=10, step="1")

    assert ("fill", "-1") in element.actions
    assert ("fill", "11") in element.actions
    assert outcome_for(report, "Number input should not accept values below 0.").passed
    assert outcome_for(report, "Number input should not accept values above 10.").passed
    assert outcome_for(report, "Number input should increment by step 1.").passed
    assert outcome_for(report, "Number input should decrement by step 1.").passed
    assert outcome_for(report, "Number input should not accept non-numeric values.").passed
    assert outcome_for(report, "Number input should allow pasting numeric values.").passed


def test_number_input_without_constraints(suite, fake_page):
    element = fake_page.add(type="number", sanitize=number_input())

    report = suite.number_input(element)

    assert report.passed, report.failures
    assert ("assign", "abc") in element.actions
    assert "ArrowUp" not in fake_page.keyboard.pressed
    assert outcome_for(report, "Number input should round decimals if step does not allow them.").passed


def test_number_input_fractional_step(suite, fake_page):
    element = fake_page.add(type="number", attributes={"step": "0.5"}, sanitize=number_input(fractions=True))

    report = suite.number_input(element, step="0.5")

    assert report.passed, report.failures
    assert outcome_for(report, "Number input should accept decimal values.").passed
    assert fake_page.keyboard.pressed[:2] == ["ArrowUp", "ArrowDown"]


def test_number_input_decimal_policy_is_configurable(make_suite, fake_page):
    element = fake_page.add(type="number")

    report = make_suite(decimal_policy="keep").number_input(element)

    assert outcome_for(report, "Number input should round decimals if step does not allow them.").passed


def test_number_input_truncation_mismatch_is_soft(suite, fake_page):
    element = fake_page.add(type="number")

    report = suite.number_input(element)

    assert not outcome_for(report, "Number input should round decimals if step does not allow them.").passed
    assert not outcome_for(report, "Number input should not accept non-numeric values.").passed
    assert outcome_for(report, "Number input should allow pasting numeric values.").passed


def test_number_input_invalid_step_is_fatal(suite, fake_page):
    element = fake_page.add(type="number")

    with pytest.raises(FieldConfigError):
        suite.number_input(element, step="any")

    assert element.actions == []


def test_range_input_with_zero_minimum(suite, fake_page):
    element = fake_page.add(
        type="range",
        value="50",
        attributes={"min": "0", "max": "100", "step": "5"},
        sanitize=number_input(0, 100, fractions=True),
    )

    report = suite.range_input(element, min=0, max=100, step=5)

    assert report.passed, report.failures
    assert outcome_for(report, "Range input should have a minimum value of 0.").passed
    assert outcome_for(report, "Range input should accept min value 0.").passed
    assert outcome_for(report, "Range input should accept a middle value of 50.").passed
    assert outcome_for(report, "Range input should not accept values greater than 100.").passed
    assert outcome_for(report, "Range input should increment correctly by step 5.").passed
    assert ("fill", "110") in element.actions
    assert not any(message.endswith("pasting.") for message in report.messages)


def test_range_input_fractional_midpoint(suite, fake_page):
    element = fake_page.add(type="range", attributes={"min": "1", "max": "4"})

    report = suite.range_input(element, min=1, max=4)

    assert ("fill", "2.5") in element.actions
    assert not outcome_for(report, "Range input should not accept values greater than 4.").passed


def test_range_input_without_constraints_only_checks_presence(suite, fake_page):
    element = fake_page.add(type="range")

    report = suite.range_input(element)

    assert report.messages == [
        "Range input should be visible.",
        "Range input should have type 'range'.",
    ]


def test_range_input_fractional_step_has_no_float_noise(suite, fake_page):
    element = fake_page.add(type="range", attributes={"min": "0.1", "max": "1", "step": "0.2"})

    report = suite.range_input(element, min=0.1, max=1, step=0.2)

    fills = [action[1] for action in element.actions if action[0] == "fill"]
    assert fills == ["0.1", "1", "0.55", "11", "0.3"]
    assert outcome_for(report, "Range input should have a step value of 0.2.").passed
    assert outcome_for(report, "Range input should increment correctly by step 0.2.").passed


def test_number_input_on_unreachable_element_returns_report(suite, fake_page):
    element = fake_page.add(type="number", visible=False, detached=True)

    report = suite.number_input(element, min=0, max=10, step="1")

    assert not report.passed
    assert not outcome_for(report, "Number input should be visible.").passed
    assert outcome_for(report, "Number input should not accept non-numeric values.").passed
    assert report.messages[-1] == "Number input should allow pasting numeric values."
