# tests/test_annotations.py

import pytest
from scaffold_core.annotations import parse_annotations
from scaffold_core.errors import MalformedTemplateError

GALLERY_RULE = """/**
 * @title Email domain allow list
 * @overview Only allow access to users with specific allow list email domains.
 * @gallery true
 * @category access control
 *
 * This rule will only allow access to users with specific email domains.
 *
 */

function emailDomainAllowList(user, context, callback) {}
"""


def test_parses_gallery_rule_header():
    metadata = parse_annotations(GALLERY_RULE)

    assert metadata.annotated_title == "Email domain allow list"
    assert metadata.overview == "Only allow access to users with specific allow list email domains."
    assert metadata.gallery is True
    assert metadata.tags == ("access control",)


def test_builtin_domain_allow_list_metadata(catalog):
    metadata = catalog.get("simple-domain-allow-list").metadata
    assert metadata.gallery is True
    assert metadata.tags == ("access control",)
    assert metadata.annotated_title == "Email domain allow list"


def test_body_without_doc_block_has_default_metadata():
    metadata = parse_annotations("function ipAddressAllowList(user, context, callback) {}\n")
    assert metadata.overview is None
    assert metadata.gallery is False
    assert metadata.tags == ()


def test_unknown_tags_are_ignored():
    body = """/**
 * Handler that will be called during the execution of a PostChangePassword flow.
 *
 * @param {Event} event - Details about the user.
 */
exports.onExecutePostChangePassword = async (event) => {
};
"""
    metadata = parse_annotations(body)
    assert metadata.tags == ()
    assert metadata.annotated_title is None


def test_only_leading_doc_block_is_read():
    body = "function rule() {}\n/**\n * @title Too late\n */\n"
    assert parse_annotations(body).annotated_title is None


def test_repeated_category_becomes_multiple_tags():
    body = "/**\n * @category access control\n * @category mfa\n * @category mfa\n */\n"
    assert parse_annotations(body).tags == ("access control", "mfa")


def test_invalid_gallery_value_raises():
    body = "/**\n * @gallery maybe\n */\n"
    with pytest.raises(MalformedTemplateError, match="@gallery") as exc_info:
        parse_annotations(body, identifier="broken")
    assert exc_info.value.identifier == "broken"


def test_gallery_false():
    assert parse_annotations("/**\n * @gallery FALSE\n */\n").gallery is False


def test_duplicate_title_raises():
    body = "/**\n * @title One\n * @title Two\n */\n"
    with pytest.raises(MalformedTemplateError, match="more than once"):
        parse_annotations(body)


def test_empty_value_raises():
    body = "/**\n * @overview\n */\n"
    with pytest.raises(MalformedTemplateError, match="no value"):
        parse_annotations(body)
