"""Name derivations and file contents for a scaffolded construct library."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List

from .errors import ScaffoldError

# Family whose java names drop the family prefix.
RESERVED_FAMILY = "AWS"

JAVA_GROUP_ID = "software.amazon.awscdk"
REPOSITORY_URL = "https://github.com/awslabs/aws-cdk.git"
HOMEPAGE = "https://github.com/awslabs/aws-cdk"

SCRIPTS = {
    "build": "cdk-build",
    "integ": "cdk-integ",
    "lint": "cdk-lint",
    "package": "cdk-package",
    "pkglint": "pkglint -f",
    "test": "cdk-test",
    "watch": "cdk-watch",
    "cfn2ts": "cfn2ts",
}

GITIGNORE = [
    "*.d.ts",
    "*.generated.ts",
    "*.js",
    "*.js.map",
    "*.snk",
    ".jsii",
    ".LAST_BUILD",
    ".LAST_PACKAGE",
    ".nycrc",
    ".nyc_output",
    "coverage",
    "dist",
    "tsconfig.json",
    "tslint.json",
]

NPMIGNORE = [
    "# The basics",
    "*.ts",
    "*.tgz",
    "*.snk",
    "!*.d.ts",
    "!*.js",
    "",
    "# Coverage",
    "coverage",
    ".nyc_output",
    ".nycrc",
    "",
    "# Build gear",
    "dist",
    ".LAST_BUILD",
    ".LAST_PACKAGE",
    ".jsii",
]


@dataclass(frozen=True)
class ModuleNames:
    namespace: str
    family: str
    base_name: str
    module_name: str
    lowcase_name: str
    package_name: str
    dotnet_package: str
    java_package: str
    java_artifact_id: str


def derive_names(namespace: str, scope: str) -> ModuleNames:
    """Derive every per-ecosystem name for `namespace` (e.g. "AWS::SQS")."""
    parts = namespace.split("::")
    if len(parts) != 2 or not all(parts):
        raise ScaffoldError(f"expected a namespace of the form Family::Name, got: {namespace!r}")
    family, base_name = parts

    module_name = f"{family}-{base_name}".lower()
    lowcase = base_name.lower()

    if family == RESERVED_FAMILY:
        java_package = f"services.{lowcase}"
        java_artifact_id = lowcase
    else:
        java_package = f"{family.lower()}.{lowcase}"
        java_artifact_id = f"{family.lower()}-{lowcase}"

    return ModuleNames(
        namespace=namespace,
        family=family,
        base_name=base_name,
        module_name=module_name,
        lowcase_name=lowcase,
        package_name=f"{scope}/{module_name}",
        dotnet_package=f"Amazon.CDK.{family}.{base_name}",
        java_package=f"{JAVA_GROUP_ID}.{java_package}",
        java_artifact_id=java_artifact_id,
    )


def build_manifest(names: ModuleNames, version: str, scope: str) -> Dict[str, Any]:
    pin = f"^{version}"
    core = f"{scope}/cdk"
    return {
        "name": names.package_name,
        "version": version,
        "description": f"The CDK Construct Library for {names.namespace}",
        "main": "lib/index.js",
        "types": "lib/index.d.ts",
        "jsii": {
            "outdir": "dist",
            "targets": {
                "dotnet": {
                    "namespace": names.dotnet_package,
                    "packageId": names.dotnet_package,
                    "signAssembly": True,
                    "assemblyOriginatorKeyFile": "../../key.snk",
                },
                "java": {
                    "package": names.java_package,
                    "maven": {
                        "groupId": JAVA_GROUP_ID,
                        "artifactId": names.java_artifact_id,
                    },
                },
                "sphinx": {},
            },
        },
        "repository": {
            "type": "git",
            "url": REPOSITORY_URL,
        },
        "homepage": HOMEPAGE,
        "scripts": dict(SCRIPTS),
        "cdk-build": {
            "cloudformation": names.namespace,
        },
        "keywords": [
            "aws",
            "cdk",
            "constructs",
            names.namespace,
            names.module_name,
        ],
        "author": {
            "name": "Amazon Web Services",
            "url": "https://aws.amazon.com",
            "organization": True,
        },
        "license": "Apache-2.0",
        "devDependencies": {
            f"{scope}/assert": pin,
            "cdk-build-tools": pin,
            "cfn2ts": pin,
            "pkglint": pin,
        },
        "dependencies": {
            core: pin,
        },
        "peerDependencies": {
            core: pin,
        },
        "engines": {
            "node": ">= 8.10.0",
        },
    }


def render_index(names: ModuleNames) -> List[str]:
    return [
        f"// {names.namespace} CloudFormation Resources:",
        f"export * from './{names.lowcase_name}.generated';",
    ]


def render_test_stub() -> List[str]:
    return [
        "import { Test, testCase } from 'nodeunit';",
        "import {} from '../lib';",
        "",
        "export = testCase({",
        "    notTested(test: Test) {",
        "        test.ok(true, 'No tests are specified for this package.');",
        "        test.done();",
        "    }",
        "});",
    ]


def render_readme(names: ModuleNames) -> List[str]:
    return [
        f"## {names.namespace} Construct Library",
        "",
        "This module is part of the [AWS Cloud Development Kit](https://github.com/awslabs/aws-cdk) project.",
        "",
        "```ts",
        f"import {names.lowcase_name} = require('{names.package_name}');",
        "```",
    ]


def to_text(contents: Any) -> str:
    """Serialize file contents: strings lose a leading newline, lists are
    joined by newlines, dicts become 2-space indented JSON. A single
    trailing newline is always appended."""
    if isinstance(contents, str):
        data = contents.lstrip()
    elif isinstance(contents, list):
        data = "\n".join(contents)
    elif isinstance(contents, dict):
        data = json.dumps(contents, indent=2, ensure_ascii=False)
    else:
        raise TypeError(f"Invalid type of contents: {contents!r}")
    return data + "\n"


def module_files(names: ModuleNames, version: str, scope: str) -> Dict[str, Any]:
    """Relative path -> contents for every generated (non-template) file."""
    return {
        "package.json": build_manifest(names, version, scope),
        ".gitignore": list(GITIGNORE),
        ".npmignore": list(NPMIGNORE),
        "lib/index.ts": render_index(names),
        f"test/test.{names.lowcase_name}.ts": render_test_stub(),
        "README.md": render_readme(names),
    }
