# type: ignore
import ast
import re

import setuptools

_version_re = re.compile(r"__version__\s+=\s+(.*)")
with open("bokeh_models/__init__.py", "rb") as f:
    _match = _version_re.search(f.read().decode("utf-8"))
    if _match is None:
        print("No version found")
        raise SystemExit(1)
    version = str(ast.literal_eval(_match.group(1)))


with open("requirements.txt", "r") as f:
    install_requires = [
        line.strip().replace("==", ">=") for line in f.readlines() if line.strip()
    ]

setuptools.setup(
    name="bokeh-models",
    version=version,
    url="",
    author="",
    description="Declarative chart models compiled to the BokehJS wire format.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=setuptools.find_namespace_packages(
        include=["bokeh_models", "bokeh_models.*"]
    ),
    install_requires=install_requires,
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["bokeh-models=bokeh_models.scripts.bokeh_models:cli"],
    },
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
