"""Write the OpenAPI schema of the conversion API to docs/openapi.json."""

from pathlib import Path

import orjson

from app.core.config import Settings
from app.factory import create_app


def main() -> None:
    """Build the app with documentation enabled and dump its schema."""
    app = create_app(Settings(APP_ENV="local"))

    output = Path("docs/openapi.json")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(orjson.dumps(app.openapi(), option=orjson.OPT_INDENT_2))


if __name__ == "__main__":
    main()
