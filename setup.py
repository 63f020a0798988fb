from setuptools import find_packages, setup

__version__ = "0.1.0"

setup(
    name="demo_suite",
    version=__version__,
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["pytest>=7.0"],
    entry_points={
        "console_scripts": [
            "demo-suite=demo_suite.cli:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.11",  # Support Python 3.11 and above
)
