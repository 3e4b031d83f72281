"""Default message properties from configuration and ``--property`` overrides."""

from __future__ import annotations

import pytest

from graphmail.adapters.config.properties import load_properties_from_dict, merge_properties, parse_property


@pytest.mark.os_agnostic
def test_properties_section_keys_are_upper_cased() -> None:
    result = load_properties_from_dict({"properties": {"mail_subject": "Report", "MAIL_RECIPIENT": "a@x.com"}})

    assert result == {"MAIL_SUBJECT": "Report", "MAIL_RECIPIENT": "a@x.com"}


@pytest.mark.os_agnostic
def test_boolean_and_numeric_values_are_rendered_as_strings() -> None:
    result = load_properties_from_dict({"properties": {"mail_save_to_sent_items": True, "retries": 3}})

    assert result == {"MAIL_SAVE_TO_SENT_ITEMS": "true", "RETRIES": "3"}


@pytest.mark.os_agnostic
def test_empty_values_and_nested_tables_are_dropped() -> None:
    result = load_properties_from_dict(
        {
            "properties": {
                "mail_cc_recipient": "",
                "mail_subject": None,
                "nested": {"x": "y"},
                "mail_content_type": "html",
            }
        }
    )

    assert result == {"MAIL_CONTENT_TYPE": "html"}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("config_dict", [{}, {"properties": "not-a-table"}, {"other": {"mail_subject": "x"}}])
def test_missing_or_malformed_section_yields_no_defaults(config_dict: dict[str, object]) -> None:
    assert load_properties_from_dict(config_dict) == {}


@pytest.mark.os_agnostic
def test_parse_property_upper_cases_name_and_keeps_value() -> None:
    assert parse_property("mail_subject= Hello = World ") == ("MAIL_SUBJECT", " Hello = World ")


@pytest.mark.os_agnostic
def test_parse_property_allows_empty_value() -> None:
    assert parse_property("MAIL_CC_RECIPIENT=") == ("MAIL_CC_RECIPIENT", "")


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("raw", "message"), [("MAIL_SUBJECT", "must be NAME=VALUE"), ("=value", "name is empty")])
def test_parse_property_rejects_malformed_input(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_property(raw)


@pytest.mark.os_agnostic
def test_overrides_win_over_defaults() -> None:
    merged = merge_properties({"MAIL_CONTENT_TYPE": "text", "MAIL_RECIPIENT": "a@x.com"}, ["mail_content_type=html"])

    assert merged == {"MAIL_CONTENT_TYPE": "html", "MAIL_RECIPIENT": "a@x.com"}


@pytest.mark.os_agnostic
def test_empty_override_removes_default() -> None:
    merged = merge_properties({"MAIL_CC_RECIPIENT": "b@x.com"}, ["MAIL_CC_RECIPIENT="])

    assert merged == {}


@pytest.mark.os_agnostic
def test_later_override_wins() -> None:
    merged = merge_properties({}, ["MAIL_SUBJECT=first", "MAIL_SUBJECT=second"])

    assert merged == {"MAIL_SUBJECT": "second"}


@pytest.mark.os_agnostic
def test_merge_does_not_mutate_defaults() -> None:
    defaults = {"MAIL_SUBJECT": "kept"}

    merge_properties(defaults, ["MAIL_SUBJECT=changed"])

    assert defaults == {"MAIL_SUBJECT": "kept"}
