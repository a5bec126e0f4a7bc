"""Script to run the application in the local configuration."""

import os

import uvicorn


def main() -> None:
    """Run the server with the local YAML overrides and auto-reload."""
    os.environ.setdefault("APP_ENV", "local")
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)


if __name__ == "__main__":
    main()
