"""Disaster Report pak listing extractor"""
import re
from pathlib import Path

from setuptools import find_packages, setup

HERE = Path(__file__).resolve(strict=True).parent


def read(*parts):
    return HERE.joinpath(*parts).open("r", encoding="utf-8").read()


# https://packaging.python.org/guides/single-sourcing-package-version/
def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setup(
    name="drpakmap",
    description=__doc__,
    long_description=read("README.rst"),
    version=find_version("src", "drpakmap", "__init__.py"),
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=True,
    python_requires=">=3.8",
    install_requires=["pefile>=2023.2.7", "pydantic>=2.0", "typing_extensions"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["drpakmap = drpakmap.convert.cli:main"]},
    classifiers=(
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
    ),
)
