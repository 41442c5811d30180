"""
IBSO Business Units catalog.

Besides its static manifest, this catalog exposes every README-<name>.md file
placed next to this module as `ibso-business://readme/<name>`.
"""

from pathlib import Path

from pattern_hub.catalogs.base import CatalogDefinition, module_resource
from pattern_hub.mcp_types import PromptArgument
from pattern_hub.prompts import template_prompt

SCHEME = "ibso-business"
CONTENT = "pattern_hub.catalogs.ibso_business.content"
README_DIR = Path(__file__).resolve().parent

RESOURCES = [
    module_resource(
        SCHEME, "vitracoat/overview",
        "Vitracoat - Overview",
        "Overview for vitracoat business unit",
        f"{CONTENT}.vitracoat", "OVERVIEW",
    ),
    module_resource(
        SCHEME, "vitracoat/business-workflows",
        "Vitracoat - Business Workflows",
        "Business workflows for vitracoat business unit",
        f"{CONTENT}.vitracoat", "BUSINESS_WORKFLOWS",
    ),
    module_resource(
        SCHEME, "patterns/client-project-structure",
        "Patterns - Client Project Structure",
        "Client project structure for patterns business unit",
        f"{CONTENT}.patterns", "CLIENT_PROJECT_STRUCTURE",
    ),
]

PROMPTS = [
    template_prompt(
        name="review_business_unit",
        description="Review a business unit's documentation for gaps",
        title_template="Reviewing {business_unit} documentation",
        text_template=(
            "Review the {business_unit} documentation exposed by this server, focusing on "
            "{focus}. Start from ibso-business://readme/{business_unit} if it exists, list "
            "missing or outdated sections, and propose concrete additions."
        ),
        arguments=[
            PromptArgument("business_unit", "Business unit slug, e.g. vitracoat", True, "vitracoat"),
            PromptArgument("focus", "Area to concentrate on", False, "workflows"),
        ],
    ),
]

CATALOG = CatalogDefinition(
    name="ibso-business",
    scheme=SCHEME,
    title="IBSO Business Units",
    description="Client-specific project patterns and configurations",
    resources=RESOURCES,
    prompts=PROMPTS,
    readme_dir=README_DIR,
)
