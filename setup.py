# setup.py
from setuptools import setup, find_packages

setup(
    name="payload-schema",            # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["pandas"],      # tabular payloads (payload_schema.frame)
    include_package_data=True,        # so we can bundle the JSON contracts
    package_data={
        "payload_schema.schemas": ["*.json"],
    },
    description="Declarative validator for nested payloads with aggregated, path-addressed errors",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
