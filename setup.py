""" bn254keygen build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import bn254keygen

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=bn254keygen.name,
    version=bn254keygen.__version__,
    license=bn254keygen.__license__,
    author=bn254keygen.__author__,
    author_email=bn254keygen.__author_email__,
    description="BN254 key derivation and point encoding for verifier contracts",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"bn254keygen": ["ecc/data/*.json"]},
    install_requires=["dataclasses_json"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "bn254-keygen=bn254keygen.cli:main",
            "bn254-diagnose=bn254keygen.cli:diagnose_main",
        ]
    },
    keywords=(
        "bn254 alt_bn128 bn256 elliptic-curves pairing bls "
        "key-derivation g1 g2 eip-197"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
