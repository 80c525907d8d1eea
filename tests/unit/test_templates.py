"""Tests for DLT template rendering and verification."""

import pytest

from eventreg.sms.templates import (
    REGISTRATION_TEMPLATE,
    TemplateError,
    matches_template,
    registration_message,
    render_template,
)


class TestRegistrationTemplate:
    def test_registration_message_exact_text(self):
        assert registration_message("RBG-AB12C") == (
            "Dear Member, your reg no:RBG-AB12C.You are registered for FESTGO EVENTS "
            "-RBG Palnadu Chapter Launch 21st Sep, 9:30AM @ SNR Convention, NRT. "
            'Lunch follows."RBG TEAM palnadu"'
        )

    def test_registration_message_matches_template(self):
        assert matches_template(REGISTRATION_TEMPLATE, registration_message("RBG-12345"))

    def test_modified_text_does_not_match(self):
        message = registration_message("RBG-12345").replace("Lunch", "Dinner")
        assert not matches_template(REGISTRATION_TEMPLATE, message)

    def test_trailing_text_does_not_match(self):
        message = registration_message("RBG-12345") + " "
        assert not matches_template(REGISTRATION_TEMPLATE, message)


class TestRenderTemplate:
    def test_values_substituted_in_order(self):
        template = "Dear {#var#},your Reg no:{#var#}."
        assert render_template(template, "Test User", "RBG-12345") == (
            "Dear Test User,your Reg no:RBG-12345."
        )

    def test_wrong_value_count(self):
        with pytest.raises(TemplateError):
            render_template("Dear {#var#},your Reg no:{#var#}.", "only-one")
