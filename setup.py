from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="gsearch",
    version="0.1.0",
    author="gsearch contributors",
    description="A generic breadth-first search engine with pluggable state spaces.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "dev", "examples")),
    python_requires=">=3.10",
    install_requires=["networkx", "numpy", "pyyaml"],
    extras_require={"dev": ["pytest"]},
    tests_require=["pytest", "networkx"],
    entry_points={"console_scripts": ["gsearch=gsearch.cli:main"]},
)
