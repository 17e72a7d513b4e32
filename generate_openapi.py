"""Dump the fitness assessment API schema to ``openapi.json``."""

from pathlib import Path
import json
import os

from src.main import app

DEFAULT_SERVER_URL = "http://localhost:8000"

# Only these operations change stored data.
WRITE_METHODS = {"post", "put", "delete"}
READ_ONLY_PATHS = {"/v1/performance-evaluations/calculate", "/v1/performance-evaluations/preview"}


def generate_openapi(server_url: str = DEFAULT_SERVER_URL) -> Path:
    """Write the schema next to this script and return the written path."""
    schema = app.openapi()
    schema["servers"] = [{"url": server_url}]

    for path, path_item in schema.get("paths", {}).items():
        for method, operation in path_item.items():
            if not isinstance(operation, dict):
                continue
            operation["x-openai-isConsequential"] = (
                method in WRITE_METHODS and path not in READ_ONLY_PATHS
            )
    output_path = Path(__file__).resolve().parent / "openapi.json"
    output_path.write_text(json.dumps(schema, indent=2))
    return output_path


if __name__ == "__main__":
    generate_openapi(os.environ.get("PUBLIC_BASE_URL", DEFAULT_SERVER_URL))
