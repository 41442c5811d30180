"""Agency client template catalog."""

from pattern_hub.catalogs.base import CatalogDefinition, module_resource
from pattern_hub.mcp_types import PromptArgument
from pattern_hub.prompts import template_prompt

SCHEME = "agency"
CONTENT = "pattern_hub.catalogs.agency.content"

RESOURCES = [
    module_resource(
        SCHEME, "clients/onboarding-checklist",
        "Client Onboarding Checklist",
        "Complete checklist for onboarding new agency clients",
        f"{CONTENT}.clients", "ONBOARDING_CHECKLIST",
        mime_type="text/plain",
    ),
    module_resource(
        SCHEME, "templates/project-structure",
        "Standard Project Structure",
        "Standardized folder structure and configuration for client projects",
        f"{CONTENT}.templates", "PROJECT_STRUCTURE",
        mime_type="text/plain",
    ),
    module_resource(
        SCHEME, "workflows/client-delivery",
        "Client Delivery Workflow",
        "Step-by-step process for delivering projects to clients",
        f"{CONTENT}.workflows", "CLIENT_DELIVERY",
        mime_type="text/plain",
    ),
    module_resource(
        SCHEME, "contracts/sow-template",
        "Statement of Work Template",
        "SOW template with scope, timeline, and deliverables",
        f"{CONTENT}.contracts", "render_sow_template",
        mime_type="text/plain",
    ),
]

PROMPTS = [
    template_prompt(
        name="onboard_client",
        description="Complete client onboarding process",
        title_template="Onboarding {client_name} for {project_type}",
        text_template=(
            "Complete the client onboarding process for {client_name} building a "
            "{project_type}. Use agency://clients/onboarding-checklist and set up the "
            "project structure using agency://templates/project-structure. Include "
            "infrastructure setup and CI/CD pipeline configuration."
        ),
        arguments=[
            PromptArgument("client_name", "Name of the client company", True, "client"),
            PromptArgument("project_type", "Type of project (web-app, api, dashboard, etc.)", True, "web application"),
        ],
        title_defaults={"project_type": "project"},
    ),
    template_prompt(
        name="generate_sow",
        description="Generate Statement of Work for client",
        title_template="Generating SOW for {client_name}",
        text_template=(
            "Create a comprehensive Statement of Work for {client_name} using "
            "agency://contracts/sow-template. Project scope: {project_scope}. Include "
            "detailed phases, deliverables, timeline, and terms."
        ),
        arguments=[
            PromptArgument("client_name", "Name of the client", True, "client"),
            PromptArgument("project_scope", "Brief description of project scope", True, "custom web application"),
        ],
    ),
    template_prompt(
        name="create_client_mcp",
        description="Generate custom MCP server for client",
        title_template="Creating custom MCP server for {client_name}",
        text_template=(
            "Generate a custom MCP server for {client_name} with domain {domain}. "
            "Include client-specific resources for project specs, branding guidelines, "
            "environment configs, and contacts."
        ),
        arguments=[
            PromptArgument("client_name", "Name of the client", True, "client"),
            PromptArgument("domain", "Client domain name", True, "client.com"),
        ],
    ),
]

CATALOG = CatalogDefinition(
    name="agency",
    scheme=SCHEME,
    title="Agency Client Template",
    description="Client onboarding, delivery workflow and contract templates",
    resources=RESOURCES,
    prompts=PROMPTS,
)
