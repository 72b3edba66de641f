"""Agregador de settings do cliente Tissue.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

from tissue.config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from tissue.config.settings.tissue import (
    CHECKIN_PATH_TEMPLATE,
    DEFAULT_DOMAIN,
    TissueSettings,
    build_checkin_url,
    get_tissue_settings,
)

__all__ = [
    "CHECKIN_PATH_TEMPLATE",
    "DEFAULT_DOMAIN",
    "BaseSettings",
    "Environment",
    "TissueSettings",
    "build_checkin_url",
    "get_base_settings",
    "get_tissue_settings",
]
