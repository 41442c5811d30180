"""
Catalogs Module

The content servers shipped with Pattern Hub:
- crm-base: CRM template UI and architecture patterns
- agency: client onboarding, delivery and contract templates
- ibso-business: business-unit documentation plus discovered READMEs
"""

from typing import Dict, List

from .base import Catalog, CatalogDefinition, build_catalog, module_resource
from .crm_base import CATALOG as CRM_BASE
from .agency import CATALOG as AGENCY
from .ibso_business import CATALOG as IBSO_BUSINESS

CATALOGS: Dict[str, CatalogDefinition] = {
    definition.name: definition
    for definition in (CRM_BASE, AGENCY, IBSO_BUSINESS)
}


def catalog_names() -> List[str]:
    return list(CATALOGS.keys())


def get_catalog(name: str) -> CatalogDefinition:
    """
    Look up a catalog definition by name.

    Raises:
        ValueError: unknown catalog
    """
    definition = CATALOGS.get(name)
    if definition is None:
        raise ValueError(f"Unknown catalog '{name}'. Available: {', '.join(catalog_names())}")
    return definition


__all__ = [
    "Catalog",
    "CatalogDefinition",
    "CATALOGS",
    "build_catalog",
    "catalog_names",
    "get_catalog",
    "module_resource",
]
