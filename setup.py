import re

from setuptools import find_packages, setup


with open("pyask/__init__.py", "rb") as fh:
    init_text = fh.read().decode()
    VERSION = re.search(r"__version__ = \"(.*?)\"", init_text).group(1)

setup(
    name="pyask",
    version=VERSION,
    packages=find_packages(
        exclude=["tests", "tests.*", "examples", "examples.*"]
    ),
    python_requires=">=3.7.0",
    install_requires=[],
    extras_require={"tests": ["pytest"]},
    license="MIT",
    description="A small builder for asking the user for input on the terminal, with colours and hidden input.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Almar Klein",
    author_email="almar.klein@gmail.com",
    zip_safe=True,
    entry_points={
        "console_scripts": [
            "pyask = pyask:cli",
        ],
    },
)
