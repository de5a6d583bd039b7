from setuptools import setup, find_packages

setup(
    name="aoc_grid",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "aoc_grid.tests"]),
    package_data={"aoc_grid": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
