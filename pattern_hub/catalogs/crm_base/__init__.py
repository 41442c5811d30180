"""CRM Template Base catalog."""

from pattern_hub.catalogs.base import CatalogDefinition, module_resource
from pattern_hub.mcp_types import PromptArgument
from pattern_hub.prompts import template_prompt

SCHEME = "crm-base"
CONTENT = "pattern_hub.catalogs.crm_base.content"

RESOURCES = [
    module_resource(
        SCHEME, "ui-system/dialog-patterns",
        "Dialog Patterns",
        "Mandatory unified dialog patterns for consistency",
        f"{CONTENT}.ui_system", "DIALOG_PATTERNS",
    ),
    module_resource(
        SCHEME, "ui-system/configuration-tabs-pattern",
        "Configuration Tabs Pattern",
        "Enterprise configuration management with tabs",
        f"{CONTENT}.ui_system", "CONFIGURATION_TABS_PATTERN",
    ),
    module_resource(
        SCHEME, "architecture/modular-forms-system",
        "Modular Forms System",
        "Form architecture built from small composable sections",
        f"{CONTENT}.architecture", "MODULAR_FORMS_SYSTEM",
    ),
    module_resource(
        SCHEME, "architecture/feature-based-organization",
        "Feature-Based Organization",
        "Scalable code organization patterns",
        f"{CONTENT}.architecture", "FEATURE_BASED_ORGANIZATION",
    ),
    module_resource(
        SCHEME, "development/typescript-excellence",
        "TypeScript Excellence",
        "Type safety patterns for enterprise applications",
        f"{CONTENT}.development", "TYPESCRIPT_EXCELLENCE",
    ),
]

PROMPTS = [
    template_prompt(
        name="add_component",
        description="Add a new UI component to the template",
        title_template="Adding {component_type} to CRM template",
        text_template=(
            "Create a new {component_type} following the shadcn/ui patterns used in the "
            "CRM template. Include TypeScript types, proper styling, and role-based "
            "access if needed. Follow crm-base://ui-system/dialog-patterns for any dialogs."
        ),
        arguments=[
            PromptArgument(
                name="component_type",
                description="Type of component to add",
                required=True,
                default="component",
            ),
        ],
    ),
]

CATALOG = CatalogDefinition(
    name="crm-base",
    scheme=SCHEME,
    title="CRM Template Base",
    description="Reusable CRM UI, architecture and development patterns",
    resources=RESOURCES,
    prompts=PROMPTS,
)
