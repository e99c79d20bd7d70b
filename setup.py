from setuptools import setup, find_packages

setup(
    name="kolor",
    version="1.0.0",
    description="Terminal text styling with ANSI colors, styles, gradients and themes",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"kolor": ["default_config/*.py"]},
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["kolor=kolor.cli:main"],
    },
    python_requires=">=3.11",
)
