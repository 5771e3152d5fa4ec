from setuptools import find_packages, setup


setup(
    name="langpack",
    version="1.0.0",
    description="Localized string packages with recursive placeholders, pools and rich text markup",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "langpack=langpack.cli:main",
        ],
    },
)
