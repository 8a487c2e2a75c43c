from setuptools import setup, find_packages

setup(
    name="itemid_browse",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "jsonschema",
        # Include other project dependencies as needed
    ],
    extras_require={
        "dev": [
            "pytest",
        ]
    },
    python_requires=">=3.8",
)
