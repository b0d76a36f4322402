from setuptools import setup, find_packages

setup(
    name="toml-describe",
    version="0.3.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2",
        "python-dotenv",
        "colorama>=0.4.6",
        "click",
        "semantic_version>=2.10",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "toml-describe=main:main",
        ],
    },
)
