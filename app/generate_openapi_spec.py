import sys

import yaml

from app.main import app


def export_openapi_spec(path: str = "openapi.yaml") -> dict:
    """Write the OpenAPI document of the API to a YAML file."""
    openapi_dict = app.openapi()
    with open(path, "w") as f:
        yaml.dump(openapi_dict, f, default_flow_style=False, allow_unicode=True)
    return openapi_dict


if __name__ == "__main__":
    export_openapi_spec(sys.argv[1] if len(sys.argv) > 1 else "openapi.yaml")
