# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="bunzz-cli",
    version="0.1.0",
    description="Command-line tool to clone, build, deploy and upload Solidity contracts with Hardhat and Bunzz",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["bunzz_cli*"]),  # Namespace packages under src/
    package_data={
        "bunzz_cli.interface.locales": ["*.json"],
    },
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'bunzz=bunzz_cli.main:main',  # Runs under the global exception supervisor
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
