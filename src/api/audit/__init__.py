"""Audit bounded context.

Delivers audit events produced by mutation procedures to a durable audit
log that is independent of the transactional store.
"""
