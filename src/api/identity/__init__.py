"""Identity bounded context.

Owns users, sessions, OAuth links, memberships and one-time passcodes, and
resolves the authenticated caller for every request.
"""
