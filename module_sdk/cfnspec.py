"""Read the CloudFormation resource specification.

Resource types are keyed `Family::Service::Resource` under `ResourceTypes`;
a namespace is the `Family::Service` prefix.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Union

from .errors import SpecificationError


def load_specification(path: Union[str, Path]) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            spec = json.load(f)
    except OSError as e:
        raise SpecificationError(f"unable to read specification {path}") from e
    except json.JSONDecodeError as e:
        raise SpecificationError(f"invalid JSON in specification {path}: {e}") from e
    if not isinstance(spec, dict) or not isinstance(spec.get("ResourceTypes"), dict):
        raise SpecificationError(f"specification {path} has no ResourceTypes map")
    return spec


def namespaces(path: Union[str, Path]) -> Iterator[str]:
    """Yield each distinct resource namespace once, in sorted order."""
    spec = load_specification(path)
    found = set()
    for type_name in spec["ResourceTypes"]:
        parts = type_name.split("::")
        if len(parts) != 3:
            raise SpecificationError(f"unexpected resource type name: {type_name}")
        found.add("::".join(parts[:2]))
    yield from sorted(found)
