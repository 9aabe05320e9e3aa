from setuptools import setup, find_packages

setup(
    name="ansiline",
    version="0.1.0",
    description="Fluent ANSI terminal styling and self-overwriting progress bars",
    packages=find_packages(include=["ansiline", "ansiline.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.12",
)
