"""Management bounded context.

Tenant-owned resources of the dashboard (APIs, keys, roles, permissions,
webhooks) and the mutation procedures that change them.
"""
