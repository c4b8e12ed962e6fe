"""Identity services: username login-or-register and bearer tokens.

Tokens are stateless signed claims; nothing about a session is stored
server-side and expiry is the only invalidation.
"""
