"""Scaffolder configuration resolved from CLI flags, environment and defaults."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_ROOT_NAME = "@aws-cdk"
DEFAULT_SCOPE = "@aws-cdk"
DEFAULT_LERNA = "npx lerna"

TEMPLATE_DIR = Path(__file__).resolve().parent / "template"


@dataclass(frozen=True)
class ScaffoldConfig:
    root: Path
    spec_path: Path
    expected_root_name: str = DEFAULT_ROOT_NAME
    scope: str = DEFAULT_SCOPE
    lerna: str = DEFAULT_LERNA
    template_dir: Path = TEMPLATE_DIR
    dry_run: bool = False

    @property
    def version_file(self) -> Path:
        """Manifest whose `version` field every generated module is pinned to."""
        return self.root / "cfnspec" / "package.json"


def load_config(
    root: Optional[str] = None,
    spec_path: Optional[str] = None,
    lerna: Optional[str] = None,
    scope: Optional[str] = None,
    dry_run: bool = False,
) -> ScaffoldConfig:
    """Build a config; explicit arguments win over environment variables.

    Environment: `CDK_PACKAGES_ROOT`, `CDK_EXPECTED_ROOT_NAME`,
    `CDK_PACKAGE_SCOPE`, `CFN_SPEC_PATH`, `LERNA`.
    """
    root_path = Path(root or os.getenv("CDK_PACKAGES_ROOT") or os.getcwd()).resolve()
    spec = spec_path or os.getenv("CFN_SPEC_PATH")
    return ScaffoldConfig(
        root=root_path,
        spec_path=Path(spec) if spec else root_path / "cfnspec" / "spec" / "specification.json",
        expected_root_name=os.getenv("CDK_EXPECTED_ROOT_NAME", DEFAULT_ROOT_NAME),
        scope=scope or os.getenv("CDK_PACKAGE_SCOPE", DEFAULT_SCOPE),
        lerna=lerna or os.getenv("LERNA", DEFAULT_LERNA),
        dry_run=dry_run,
    )
