from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="perfectmaze",
    version="0.1.0",
    description="Random perfect maze generation with a randomized Kruskal spanning tree",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=["numpy", "joblib"],
    extras_require={"test": ["pytest"]},
)
