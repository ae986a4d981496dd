from setuptools import setup, find_packages

setup(
    name="login_probe",
    version="0.1",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        # HTTP client
        "requests>=2.31.0",

        # Request schema
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "login-probe=login_probe.probe:main",
        ],
    },
)
