"""
Settings for the API, the worker and Alembic.

Values come from the environment or a local ``.env`` file; see
``.env.example`` for the variables a deployment sets.

    from brainvault.config import settings

    settings.SEARCH_SCORE_THRESHOLD   # 0.75
"""

from brainvault.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
