from setuptools import setup, find_packages

setup(
    name="translation-assistant",
    version="0.1.0",
    description="Translation suggestions for strings with math, graphies and widgets",
    author="Translation Assistant Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "jinja2>=3.1.2",
        "pydantic>=2.0.0",
        "loguru>=0.7.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
)
