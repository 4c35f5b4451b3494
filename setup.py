from setuptools import setup, find_packages

from prioheap import __version__

setup(
    name="prioheap",
    version=__version__,
    author="prioheap developers",
    packages=find_packages(exclude=["*.tests"]),
    license="MIT"
)
