import copy

import yaml


def build_openapi_schema(app, lambda_arn: str = "${lambda_arn}") -> dict:
    # Copy so the app's cached schema is left untouched
    openapi_schema = copy.deepcopy(app.openapi())

    # API Gateway only imports 3.0.x
    openapi_schema["openapi"] = "3.0.0"

    openapi_schema["info"] = {
        "title": "German Translation Proxy API",
        "description": "Translates German words to English through Gemini",
        "version": "1.0.0"
    }

    # Rename schemas to remove hyphens
    components = openapi_schema.get("components", {})
    if "schemas" in components:
        renames = {name: name.replace("-", "") for name in components["schemas"]}
        components["schemas"] = {renames[name]: schema for name, schema in components["schemas"].items()}
        openapi_schema["components"] = components
        _rewrite_refs(openapi_schema, renames)

    # Lambda proxy integration on every method
    for path, methods in openapi_schema.get("paths", {}).items():
        for method, details in methods.items():
            details["x-amazon-apigateway-integration"] = {
                "uri": lambda_arn,
                "httpMethod": "POST",
                "type": "aws_proxy"
            }

    return openapi_schema


def _rewrite_refs(node, renames):
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                prefix, _, name = value.rpartition("/")
                if name in renames:
                    node[key] = f"{prefix}/{renames[name]}"
            else:
                _rewrite_refs(value, renames)
    elif isinstance(node, list):
        for item in node:
            _rewrite_refs(item, renames)


def main(path: str = "openapi.yaml"):
    from main import app

    with open(path, "w") as f:
        yaml.dump(build_openapi_schema(app), f, default_flow_style=False)

    print(f"OpenAPI schema has been generated and saved to {path}")


if __name__ == "__main__":
    main()
