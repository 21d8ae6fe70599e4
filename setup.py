from setuptools import setup, find_packages

setup(
    name="polydist",
    version="0.1.0",
    packages=find_packages(include=["polydist", "polydist.*"]),
    install_requires=[
        "torch",
        "triton",
        "numpy",
    ],
    extras_require={
        "plot": ["matplotlib"],
        "test": ["pytest", "matplotlib"],
    },
    entry_points={
        "console_scripts": [
            "polydist=polydist.cli:main",
        ],
    },
    python_requires=">=3.8",
)
