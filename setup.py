from setuptools import setup, find_packages

setup(
    name="multicon",
    version="0.1.0",
    packages=find_packages(include=["multicon", "multicon.*"]),
    install_requires=[
        "numpy",
        "gymnasium",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
