import json
import sys
from pathlib import Path
from typing import Any, Dict

from jsonschema import ValidationError, validate

from .errors import ManifestValidationError

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "package-manifest.schema.json"


def load_schema():
    with open(SCHEMA_PATH, 'r', encoding='utf-8') as f:
        return json.load(f)


def check_manifest(manifest: Dict[str, Any]) -> None:
    """Raise ManifestValidationError if `manifest` does not match the schema."""
    try:
        validate(instance=manifest, schema=load_schema())
    except ValidationError as e:
        raise ManifestValidationError(f"{manifest.get('name', '<unnamed>')}: {e.message}") from e


def validate_manifest(manifest_path: str) -> bool:
    with open(manifest_path, 'r', encoding='utf-8') as f:
        manifest = json.loads(f.read())
    try:
        check_manifest(manifest)
        print("Manifest is valid")
        return True
    except ManifestValidationError as e:
        print("Manifest validation failed:")
        print(e)
        return False


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print("Usage: python -m module_sdk.validator path/to/package.json")
        sys.exit(2)
    ok = validate_manifest(sys.argv[1])
    sys.exit(0 if ok else 1)
