"""Authentication and authorization.

Two layers:
1. require_auth → bearer token in the authorization header → Payload
2. ensure_owner → Payload.username must match the resource owner
"""
