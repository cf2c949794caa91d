from setuptools import setup, find_packages

setup(
    name="techterm",
    version="0.1.0",
    description="A simulated TechOS shell for the terminal",
    packages=find_packages(include=["techterm", "techterm.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "techterm=techterm.__main__:main",
        ],
    },
    python_requires=">=3.11",
)
