import json

import pytest

from module_sdk.config import load_config

SPEC = {
    "ResourceSpecificationVersion": "2.8.0",
    "ResourceTypes": {
        "AWS::SQS::Queue": {},
        "AWS::SQS::QueuePolicy": {},
        "AWS::EC2::Instance": {},
        "Alexa::ASK::Skill": {},
    },
}


@pytest.fixture
def packages_root(tmp_path):
    root = tmp_path / "packages" / "@aws-cdk"
    cfnspec_dir = root / "cfnspec"
    (cfnspec_dir / "spec").mkdir(parents=True)
    with open(cfnspec_dir / "package.json", "w", encoding="utf-8") as fh:
        json.dump({"name": "@aws-cdk/cfnspec", "version": "1.2.3"}, fh)
    with open(cfnspec_dir / "spec" / "specification.json", "w", encoding="utf-8") as fh:
        json.dump(SPEC, fh)
    return root


@pytest.fixture
def config(packages_root, monkeypatch):
    for var in ("CDK_PACKAGES_ROOT", "CDK_EXPECTED_ROOT_NAME", "CDK_PACKAGE_SCOPE", "CFN_SPEC_PATH", "LERNA"):
        monkeypatch.delenv(var, raising=False)
    return load_config(root=str(packages_root), lerna="lerna")


@pytest.fixture
def commands(monkeypatch):
    """Record build orchestrator commands instead of running them."""
    calls = []
    monkeypatch.setattr("module_sdk.create_missing_libraries.exec_command", calls.append)
    return calls
