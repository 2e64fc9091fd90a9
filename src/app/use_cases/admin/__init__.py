"""Admin use cases for system administration operations."""

from .provision_tenant_use_case import ProvisionTenantUseCase, ProvisionTenantResponse
from .suspend_tenant_use_case import SuspendTenantUseCase, SuspendTenantResponse
from .restore_tenant_use_case import RestoreTenantUseCase, RestoreTenantResponse

__all__ = [
    "ProvisionTenantUseCase",
    "ProvisionTenantResponse",
    "SuspendTenantUseCase",
    "SuspendTenantResponse",
    "RestoreTenantUseCase",
    "RestoreTenantResponse",
]
