"""Tests for the shipped catalogs."""

import pytest

from pattern_hub.catalogs import CATALOGS, CatalogDefinition, build_catalog, catalog_names, get_catalog
from pattern_hub.mcp_types import RegistrationConflictError
from pattern_hub.resources import StaticProducer
from pattern_hub.mcp_types import ResourceDescriptor


class TestCatalogLookup:
    """Test catalog lookup."""

    def test_catalog_names(self):
        """Should ship the three catalogs."""
        assert catalog_names() == ["crm-base", "agency", "ibso-business"]

    def test_unknown_catalog(self):
        """Should list available catalogs in the error."""
        with pytest.raises(ValueError) as exc_info:
            get_catalog("nope")

        assert "crm-base" in str(exc_info.value)


class TestBuildCatalog:
    """Test catalog assembly."""

    def test_crm_base_manifest(self, logger):
        """Should register the crm-base manifest in order."""
        catalog = build_catalog(get_catalog("crm-base"), logger)

        assert [r.uri for r in catalog.registry.list()] == [
            "crm-base://ui-system/dialog-patterns",
            "crm-base://ui-system/configuration-tabs-pattern",
            "crm-base://architecture/modular-forms-system",
            "crm-base://architecture/feature-based-organization",
            "crm-base://development/typescript-excellence",
        ]
        assert [p.name for p in catalog.prompts.list()] == ["add_component"]

    def test_agency_is_plain_text(self, logger):
        """Should serve agency resources as text/plain."""
        catalog = build_catalog(get_catalog("agency"), logger)

        assert {r.mimeType for r in catalog.registry.list()} == {"text/plain"}
        assert [p.name for p in catalog.prompts.list()] == [
            "onboard_client",
            "generate_sow",
            "create_client_mcp",
        ]

    def test_ibso_business_discovers_readmes_after_static(self, logger):
        """Should list discovered READMEs after static entries."""
        catalog = build_catalog(get_catalog("ibso-business"), logger)
        uris = [r.uri for r in catalog.registry.list()]

        assert uris[:3] == [
            "ibso-business://vitracoat/overview",
            "ibso-business://vitracoat/business-workflows",
            "ibso-business://patterns/client-project-structure",
        ]
        assert uris[3:] == [
            "ibso-business://readme/laboratory",
            "ibso-business://readme/vitracoat",
        ]

    def test_readme_dir_override(self, logger, tmp_path):
        """Should scan the override directory instead of the package directory."""
        (tmp_path / "README-sales.md").write_text("# Sales")

        catalog = build_catalog(get_catalog("ibso-business"), logger, readme_dir=tmp_path)

        readmes = [r.uri for r in catalog.registry.list() if "/readme/" in r.uri]
        assert readmes == ["ibso-business://readme/sales"]

    def test_conflicting_definition_aborts(self, logger):
        """Should propagate registration conflicts."""
        resource = ResourceDescriptor("x://a/b", "A", "A", StaticProducer("a"))
        definition = CatalogDefinition(
            name="x", scheme="x", title="X", description="X",
            resources=[resource, resource],
        )

        with pytest.raises(RegistrationConflictError):
            build_catalog(definition, logger)


@pytest.mark.asyncio
class TestCatalogContent:
    """Test that every cataloged resource loads."""

    @pytest.mark.parametrize("name", list(CATALOGS))
    async def test_every_resource_reads(self, logger, name):
        """Should load non-empty text for every listed resource."""
        catalog = build_catalog(get_catalog(name), logger)

        for resource in catalog.registry.list():
            descriptor, content = await catalog.registry.read(resource.uri)
            assert isinstance(content, str)
            assert content.strip()
            assert descriptor is resource

    async def test_sow_template_sections(self, logger):
        """Should render the numbered SOW sections."""
        catalog = build_catalog(get_catalog("agency"), logger)

        _, content = await catalog.registry.read("agency://contracts/sow-template")

        assert content.startswith("# Statement of Work Template")
        assert "## 1. Project Overview" in content


class TestCatalogPrompts:
    """Test shipped prompt templates."""

    def test_add_component_default(self, logger):
        """Should fall back to 'component'."""
        catalog = build_catalog(get_catalog("crm-base"), logger)

        rendered = catalog.prompts.render("add_component", {})

        assert rendered.description == "Adding component to CRM template"

    def test_onboard_client_defaults(self, logger):
        """Should use 'project' in the title and 'web application' in the text."""
        catalog = build_catalog(get_catalog("agency"), logger)

        rendered = catalog.prompts.render("onboard_client", {})

        assert rendered.description == "Onboarding client for project"
        assert "building a web application" in rendered.messages[0].text

    def test_onboard_client(self, logger):
        """Should substitute client and project type."""
        catalog = build_catalog(get_catalog("agency"), logger)

        rendered = catalog.prompts.render(
            "onboard_client", {"client_name": "Acme", "project_type": "dashboard"}
        )

        assert rendered.description == "Onboarding Acme for dashboard"
        assert "agency://clients/onboarding-checklist" in rendered.messages[0].text
