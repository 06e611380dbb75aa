"""
setup.py

Установка симулятора.

Использование:
    pip install -e .            # разработка
    pip install -e .[test]      # с pytest
"""

from setuptools import setup, find_packages

setup(
    name="peg_sim",
    version="1.0.0",
    description="Seeded Peg Solitaire simulator and winning-seed search",
    packages=find_packages(include=["core", "simulation", "peg_io", "solutions", "utils", "web"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-sim=main:main",
        ],
    },
    zip_safe=False,
)
