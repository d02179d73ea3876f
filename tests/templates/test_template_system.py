import pytest
from pydantic import ValidationError
from scaffold_core.models import Category
from scaffold_core.templates.registry import (
    DEFINITIONS_DIR,
    EMPTY_ACTION,
    TEMPLATE_REGISTRY,
    builtin_manifest,
)

REGISTRY_IDS = [entry.identifier for entry in TEMPLATE_REGISTRY]


def test_registry_has_12_templates():
    assert len(TEMPLATE_REGISTRY) == 12


def test_registry_identifiers_are_unique():
    assert len(set(REGISTRY_IDS)) == len(REGISTRY_IDS)


def test_all_templates_have_required_fields():
    for entry in TEMPLATE_REGISTRY:
        assert entry.identifier
        assert entry.title
        assert entry.path
        assert isinstance(entry.category, Category)


def test_empty_action_is_registered():
    assert EMPTY_ACTION in REGISTRY_IDS


@pytest.mark.parametrize("entry", TEMPLATE_REGISTRY, ids=REGISTRY_IDS)
def test_template_files_exist(entry):
    path = DEFINITIONS_DIR / entry.path
    assert path.is_file()
    assert path.read_bytes().strip() != b""


@pytest.mark.parametrize("entry", TEMPLATE_REGISTRY, ids=REGISTRY_IDS)
def test_bodies_match_resource_bytes(catalog, entry):
    template = catalog.get(entry.identifier)
    assert template.body.encode("utf-8") == (DEFINITIONS_DIR / entry.path).read_bytes()


def test_action_templates_export_handlers(catalog):
    for category in (
        Category.EMAIL_PROVIDER,
        Category.PHONE_PROVIDER,
        Category.POST_CHANGE_PASSWORD,
        Category.SEND_PHONE_MESSAGE,
        Category.ACTION,
    ):
        for template in catalog.list_by_category(category):
            assert "exports.onExecute" in template.body


def test_rule_templates_call_callback(catalog):
    rules = list(catalog.list_by_category(Category.RULE))
    assert len(rules) == 6
    for template in rules:
        assert "callback(" in template.body


def test_branding_snippet_targets_storybook_panel(catalog):
    template = catalog.get("branding-customization-notification")
    assert template.category == Category.BRANDING
    assert "#panel-tab-content > div" in template.body
    assert "branding-close-button" in template.body


def test_builtin_manifest_resolves_into_definitions():
    manifest = builtin_manifest()
    for entry in manifest.templates:
        assert manifest.resolve(entry).parent in (DEFINITIONS_DIR, DEFINITIONS_DIR / "branding")


def test_registry_entries_are_frozen(catalog):
    with pytest.raises(ValidationError):
        TEMPLATE_REGISTRY[0].title = "Changed"

    assert catalog.get(TEMPLATE_REGISTRY[0].identifier).title == "Custom email provider"


def test_registry_is_a_tuple():
    assert isinstance(TEMPLATE_REGISTRY, tuple)
    with pytest.raises(AttributeError):
        TEMPLATE_REGISTRY.append(TEMPLATE_REGISTRY[0])
