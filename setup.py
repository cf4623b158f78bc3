from setuptools import setup, find_packages

setup(
    name="ssm_migrate",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "boto3>=1.26.0",
        "botocore>=1.29.0",
        "ruamel.yaml>=0.17.0",
        "jsonschema>=3.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ssm-migrate=ssm_migrate.cli:main",
        ],
    },
    author="Jon Staples",
    author_email="example@example.com",
    description="A utility for migrating SSM Parameter Store parameters to a new naming hierarchy",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
