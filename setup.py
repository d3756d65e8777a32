import os
from setuptools import setup, find_packages

with open(
    os.path.join(
        os.path.dirname(os.path.realpath(__file__)), "onetimesecret", "requirements.txt"
    )
) as f:
    requirements = f.read().splitlines()

setup(
    name="onetimesecret",
    version="0.1.0",
    description="Python client for the OneTimeSecret api",
    url="https://onetimesecret.com/docs/api",
    packages=find_packages(include=["onetimesecret", "onetimesecret.*"]),
    package_data={"onetimesecret": ["requirements.txt"]},
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
