import os

from setuptools import setup

install_requires = [
    r
    for r in (x.strip() for x in open("requirements.txt"))
    if r and not r.startswith("#")
]


# Utility function to read the README file.
# Used for the long_description.
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name="maxheap",
    version="0.1",
    author="maxheap",
    author_email="",
    description=("Array backed max heap with a deferred-repair mutable peek"),
    license="MIT",
    keywords="heap,priority queue",
    url="",
    packages=["maxheap", "maxheap.tests"],
    long_description=read("README.md"),
    classifiers=["Development Status :: 3 - Alpha", "License :: OSI Approved :: MIT License"],
    install_requires=install_requires,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    entry_points={"console_scripts": ["maxheap-demo=maxheap.demo:main"]},
)
