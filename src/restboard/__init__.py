"""Restboard — a small REST API for users and messages.

Two in-memory resources (users, messages) served over HTTP, with
message creation guarded by a short-lived signed bearer token.
"""

__version__ = "0.1.0"
