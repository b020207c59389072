from setuptools import setup, find_packages

setup(
    name="amm-menu",
    version="1.0.0",
    description="amm - JWM menu generator for FreeDesktop .desktop files",
    author="Chirantan Mitra",
    license="GPLv3",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyQt6>=6.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "amm=amm.main:main",
        ],
    },
)
