"""
App assembly entry point.

Re-exports the FastAPI `app` from `sitecms.api.main` and runs it with
uvicorn when executed directly.
"""

from sitecms.api.main import app  # noqa: F401


if __name__ == "__main__":
    import uvicorn
    from sitecms.utils.config import get_settings

    uvicorn.run(app, host="0.0.0.0", port=get_settings().server_port)
