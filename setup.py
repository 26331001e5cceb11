from setuptools import find_packages, setup


setup(
    name="jsonprettifier",
    version="0.1.0",
    description="Strip JSONC comments and pretty-print JSON files in place",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src", include=["jsonprettifier", "jsonprettifier.*"]),
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "jsonprettifier=jsonprettifier.cli:main",
        ],
    },
)
