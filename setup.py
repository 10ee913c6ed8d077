from setuptools import setup, find_packages

setup(
    name="listops",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "matplotlib>=3.7.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description="Textbook list algorithms: sorted set operations, sliding windows, combinations",
    python_requires=">=3.10",
)
