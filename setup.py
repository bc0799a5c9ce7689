from setuptools import setup

setup(
    name="typedargv",
    version="0.1.0",
    python_requires='>=3.10',
    description="A typed command-line argument parser",
    packages=["typedargv"],
    install_requires=[
        "dataclasses-json",
    ],
    extras_require={
        "test": ["pytest"],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
