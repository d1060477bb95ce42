from setuptools import setup, find_packages


setup(
    name="ratapprox",
    version="0.1.0",
    python_requires=">=3.8",
    packages=find_packages(include=["ratapprox*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "dev": ["pre-commit", "pytest"],
    },
    entry_points={
        "console_scripts": ["ratapprox=ratapprox.__main__:main"],
    },
)
