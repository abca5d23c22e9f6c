"""
HTTP surface of BrainVault.

``main.create_application()`` assembles the app from a Database handle, a
vector index adapter and an embedding client; ``main.app`` is the instance
uvicorn serves. Handlers stay thin: they parse the request, call one service
and shape the response. Errors raised below them are rendered by
``middleware.error_handler``.

    uvicorn brainvault.api.main:app --port 5000
"""
