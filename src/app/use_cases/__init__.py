"""
Use Cases

Organized into domain folders:
- tokens/: Access token authority (issue, validate, revoke, list, share)
- events/: Event management
- public/: Token-gated public event access
- admin/: Tenant provisioning and billing status
- audit/: Audit logs
"""
