"""
Routers, one module per resource.

- auth_handler: POST /signup, POST /signin
- content_handler: POST, GET and DELETE /content
- search_handler: GET /search
- share_handler: POST /brain/share, GET /brain/{share_link}
- health_handler: /health, /ready, /live (unversioned)
"""

from brainvault.api.handlers import (
    auth_handler,
    content_handler,
    health_handler,
    search_handler,
    share_handler,
)

__all__ = [
    "auth_handler",
    "content_handler",
    "health_handler",
    "search_handler",
    "share_handler",
]
