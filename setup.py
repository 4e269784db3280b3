from setuptools import setup, find_packages

setup(
    name="uiauto-electron",
    version="1.0.0",
    packages=find_packages(include=["uiauto_electron", "uiauto_electron.*"]),
    install_requires=[
        "pyyaml>=5.4",
        "jsonschema>=4.0.0",
        "selenium>=4.10.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    package_data={
        "uiauto_electron": ["schemas/*.json", "locators/*.yaml"],
    },
)
