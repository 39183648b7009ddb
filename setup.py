from setuptools import setup, find_packages

setup(
    name="codebundle",
    version="1.0.0",
    description="Bundle source files of selected languages into a single file",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "codebundle=codebundle.cli:main",
        ]
    },
)
