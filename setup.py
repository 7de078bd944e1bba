from setuptools import setup, find_packages

setup(
    name="folderbench",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=["requests"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "folderbench = folderbench.cli:main",
        ]
    },
)
