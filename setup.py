""" seedutils build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import seedutils

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=seedutils.name,
    version=seedutils.__version__,
    license=seedutils.__license__,
    author=seedutils.__author__,
    author_email=seedutils.__author_email__,
    description="BIP39 seed utilities: child seeds, extend, truncate, xor, xpubs",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"seedutils.mnemonic": ["_data/english.txt"]},
    include_package_data=True,
    install_requires=["pycryptodome"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["seed-utils=seedutils.cli:main"]},
    keywords="bitcoin bip39 bip32 bip85 slip132 mnemonic seed xor xpub",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
