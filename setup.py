from setuptools import setup, find_packages

setup(
    name="gatesim",
    version="0.1.0",
    packages=find_packages(include=["gatesim", "gatesim.*"]),
    install_requires=[
        "python-dotenv",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "gatesim=gatesim.frontend.main:main",
        ],
    },
)
