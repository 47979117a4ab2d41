"""
Setup utility for coilcalc
"""

from setuptools import find_packages, setup

short = (
    "Magnetic field of circular current loops, sampled on a grid in the x-z "
    "plane, using polynomial approximations of the complete elliptic integrals."
)


with open("README.md", "r") as f:
    long = f.read()

install_requires = [
    "numba",
    "numpy",
    "rich",
]

dev_requires = [
    "black",
    "flake8",
    "flake8-absolute-import",
    "flake8-docstrings",
    "pep8-naming",
    "pre-commit",
    "pytest",
    "pytest-cov",
    "scipy",
]

test_requires = [
    "pytest",
    "scipy",
]

extras_require = {
    "dev": dev_requires,
    "test": test_requires,
}

setup(
    name="coilcalc",
    version="0.1.0",
    description=short,
    long_description=long,
    long_description_content_type="text/markdown",
    author="The coilcalc team",
    author_email="",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)",
        "Operating System :: POSIX :: Linux",
    ],
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.10",
    zip_safe=False,
    install_requires=install_requires,
    extras_require=extras_require,
)
