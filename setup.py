from setuptools import find_packages, setup

setup(
    name="cdk-module-sdk",
    version="0.1.0",
    description="Scalable attribute constructs and construct-library scaffolding for the CDK packages tree",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "module_sdk": ["schemas/*.json", "template/*", "template/**/*"],
    },
    python_requires=">=3.8",
    install_requires=[
        # manifest validation before a scaffolded package is written
        "jsonschema>=4.0.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "create-missing-libraries=module_sdk.create_missing_libraries:main",
        ],
    },
)
