import dataclasses
import json
import shutil
import sys

import pytest

from module_sdk import create_missing_libraries as cml
from module_sdk.errors import BuildCommandError, RootDirectoryError


def _snapshot(path):
    return {p.relative_to(path).as_posix(): p.read_bytes() for p in sorted(path.rglob("*")) if p.is_file()}


def test_generates_every_missing_module(config, commands):
    generated = cml.run(config)
    assert generated == ["@aws-cdk/aws-ec2", "@aws-cdk/aws-sqs", "@aws-cdk/alexa-ask"]

    module = config.root / "aws-sqs"
    for rel in ("package.json", ".gitignore", ".npmignore", "lib/index.ts", "test/test.sqs.ts", "README.md"):
        assert (module / rel).is_file(), rel
    # static template files are overlaid too
    assert (module / "LICENSE").is_file()
    assert (module / "NOTICE").is_file()

    manifest = json.loads((module / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "@aws-cdk/aws-sqs"
    assert manifest["dependencies"] == {"@aws-cdk/cdk": "^1.2.3"}
    assert (module / "lib" / "index.ts").read_text(encoding="utf-8") == (
        "// AWS::SQS CloudFormation Resources:\nexport * from './sqs.generated';\n"
    )


def test_build_commands_per_module_in_order(config, commands):
    cml.run(config)
    assert commands[:2] == [
        "lerna bootstrap --scope @aws-cdk/aws-ec2",
        "lerna run --include-filtered-dependencies --progress build --scope @aws-cdk/aws-ec2",
    ]
    assert len(commands) == 6
    assert commands[-1].endswith("--scope @aws-cdk/alexa-ask")


def test_existing_module_is_skipped(config, commands):
    existing = config.root / "aws-sqs"
    existing.mkdir()
    (existing / "marker").write_text("keep", encoding="utf-8")

    generated = cml.run(config)

    assert "@aws-cdk/aws-sqs" not in generated
    assert [p.name for p in existing.iterdir()] == ["marker"]
    assert not any("aws-sqs" in c for c in commands)


def test_second_run_does_nothing(config, commands):
    cml.run(config)
    before = _snapshot(config.root)
    commands.clear()

    assert cml.run(config) == []
    assert commands == []
    assert _snapshot(config.root) == before


def test_regeneration_is_byte_identical(config, commands):
    cml.run(config)
    first = _snapshot(config.root / "alexa-ask")
    shutil.rmtree(config.root / "alexa-ask")

    cml.run(config)
    assert _snapshot(config.root / "alexa-ask") == first


def test_build_failure_aborts_remaining_namespaces(config, monkeypatch):
    def fail(command):
        raise BuildCommandError(command, 2)

    monkeypatch.setattr(cml, "exec_command", fail)
    with pytest.raises(BuildCommandError, match="non-zero exit code: 2"):
        cml.run(config)

    # files written before the failure stay on disk
    assert (config.root / "aws-ec2" / "package.json").is_file()
    assert not (config.root / "aws-sqs").exists()


def test_wrong_root_fails_before_any_work(config, commands):
    bad = dataclasses.replace(config, root=config.root.parent)
    with pytest.raises(RootDirectoryError, match="Did you move me"):
        cml.run(bad)
    assert commands == []
    assert not (config.root / "aws-ec2").exists()


def test_dry_run_skips_build(config, commands):
    cml.run(dataclasses.replace(config, dry_run=True))
    assert commands == []
    assert (config.root / "aws-ec2" / "README.md").is_file()


def test_template_subdirectories_are_copied(config, commands, tmp_path):
    template = tmp_path / "template"
    (template / "docs").mkdir(parents=True)
    (template / "docs" / "intro.md").write_text("hi\n", encoding="utf-8")
    (template / "LICENSE").write_text("license\n", encoding="utf-8")

    cml.run(dataclasses.replace(config, template_dir=template))
    assert (config.root / "aws-ec2" / "docs" / "intro.md").read_text(encoding="utf-8") == "hi\n"
    assert (config.root / "aws-ec2" / "LICENSE").read_text(encoding="utf-8") == "license\n"


def test_exec_command_success_and_failure():
    cml.exec_command(f'"{sys.executable}" -c "import sys; sys.exit(0)"')
    with pytest.raises(BuildCommandError) as excinfo:
        cml.exec_command(f'"{sys.executable}" -c "import sys; sys.exit(3)"')
    assert excinfo.value.returncode == 3
    assert "non-zero exit code: 3" in str(excinfo.value)


def test_main_exit_codes(config, packages_root, commands, tmp_path):
    assert cml.main(["--root", str(packages_root), "--dry-run"]) == 0
    assert (packages_root / "aws-ec2").is_dir()

    assert cml.main(["--root", str(tmp_path)]) == 1


def test_failure_is_printed_to_stderr_at_any_log_level(config, commands, tmp_path, capsys):
    assert cml.main(["--root", str(tmp_path), "--log-level", "CRITICAL"]) == 1
    err = capsys.readouterr().err
    assert "Did you move me?" in err
