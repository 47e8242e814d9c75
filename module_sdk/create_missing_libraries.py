"""Create a construct library for every CloudFormation namespace that lacks one.

Usage: python -m module_sdk.create_missing_libraries --root packages/@aws-cdk

For each namespace in the resource specification whose module directory does
not exist yet, writes the package boilerplate, copies the static template
files, then bootstraps and builds the new package with lerna. Existing module
directories are never touched.
"""

import argparse
import json
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Any, List, Optional

from . import cfnspec
from .config import ScaffoldConfig, load_config
from .errors import BuildCommandError, RootDirectoryError
from .render import derive_names, module_files, to_text
from .validator import check_manifest

logger = logging.getLogger(__name__)


def check_root(config: ScaffoldConfig) -> None:
    if config.root.name != config.expected_root_name:
        raise RootDirectoryError(
            f"Something went wrong. We expected {config.root} to be the "
            f'"packages/{config.expected_root_name}" directory. Did you move me?'
        )


def read_version(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)["version"]


def write_file(module_path: Path, relative_path: str, contents: Any) -> None:
    full_path = module_path / relative_path
    full_path.parent.mkdir(parents=True, exist_ok=True)
    with open(full_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(to_text(contents))


def copy_template(template_dir: Path, module_path: Path) -> None:
    """Overlay every entry of `template_dir` onto `module_path`."""
    for name in sorted(os.listdir(template_dir)):
        src = template_dir / name
        dest = module_path / name
        if src.is_dir():
            shutil.copytree(src, dest, dirs_exist_ok=True)
        else:
            shutil.copy2(src, dest)


def exec_command(command: str) -> None:
    """Run `command` through the shell with inherited output; no timeout."""
    proc = subprocess.run(command, shell=True, stdin=subprocess.DEVNULL, check=False)
    if proc.returncode != 0:
        raise BuildCommandError(command, proc.returncode)


def build_package(lerna: str, package_name: str) -> None:
    """Link the new package, then build it together with its dependency graph."""
    for command in (
        f"{lerna} bootstrap --scope {package_name}",
        f"{lerna} run --include-filtered-dependencies --progress build --scope {package_name}",
    ):
        logger.info("running %s", command)
        exec_command(command)


def scaffold(config: ScaffoldConfig, namespace: str, version: str) -> Optional[str]:
    """Generate the module for `namespace`; return its package name, or None
    when the module directory already exists."""
    names = derive_names(namespace, config.scope)
    module_path = config.root / names.module_name

    # existing modules are never regenerated or updated
    if module_path.exists():
        logger.debug("skipping %s: %s already exists", namespace, module_path)
        return None

    files = module_files(names, version, config.scope)
    check_manifest(files["package.json"])

    logger.info("generating module for %s...", names.package_name)
    for relative_path, contents in files.items():
        write_file(module_path, relative_path, contents)
    copy_template(config.template_dir, module_path)

    if config.dry_run:
        logger.info("dry run: not building %s", names.package_name)
    else:
        build_package(config.lerna, names.package_name)
    return names.package_name


def run(config: ScaffoldConfig) -> List[str]:
    """Scaffold every missing module, in specification order."""
    check_root(config)
    version = read_version(config.version_file)

    generated = []
    for namespace in cfnspec.namespaces(config.spec_path):
        package_name = scaffold(config, namespace, version)
        if package_name:
            generated.append(package_name)
    logger.info("generated %d module(s)", len(generated))
    return generated


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Create construct libraries for uncovered CloudFormation namespaces")
    p.add_argument("--root", help="packages/@aws-cdk directory (default: $CDK_PACKAGES_ROOT or cwd)")
    p.add_argument("--spec", help="CloudFormation resource specification JSON")
    p.add_argument("--lerna", help="lerna command (default: $LERNA or 'npx lerna')")
    p.add_argument("--scope", help="npm scope for generated packages")
    p.add_argument("--dry-run", action="store_true", help="write files but skip bootstrap and build")
    p.add_argument("--log-level", default=os.getenv("SCAFFOLD_LOG_LEVEL", "INFO"))
    args = p.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        config = load_config(
            root=args.root, spec_path=args.spec, lerna=args.lerna, scope=args.scope, dry_run=args.dry_run
        )
        run(config)
    except Exception as e:  # pylint: disable=broad-except
        logger.exception("scaffolding failed: %s", e)
        print(f"{e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
