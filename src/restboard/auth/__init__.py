"""Authentication and authorization.

Learn: a single authentication path — a short-lived JWT presented as
"Authorization: Bearer <token>". The token carries the user it was
minted for, so identity is re-derived from it on every request and no
session state lives on the server.
"""
