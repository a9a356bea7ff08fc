import re

from setuptools import setup, find_packages

with open("aws_sso_login/__init__.py") as f:
    version = re.search(r"^__version__ = \"([^\"]+)\"", f.read(), re.M).group(1)

setup(
    name="aws-sso-login",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "botocore>=1.29.0",
        "requests>=2.28.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "aws-sso-login=aws_sso_login.cli:main",
        ],
    },
    python_requires=">=3.9",
    description="CLI that streamlines AWS SSO authentication and credentials management",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
)
