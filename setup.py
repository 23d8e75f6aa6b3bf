from setuptools import setup, find_packages

setup(
    name="ImportTally",
    version="0.1.0",
    packages=find_packages(include=["ImportTally", "ImportTally.*"]),
    py_modules=["main"],
    python_requires=">=3.10",
    install_requires=[
        "tree-sitter>=0.23",
        "tree-sitter-typescript>=0.23",
        "pandas>=2.2.3",
        "tqdm>=4.66.4",
        "python-dotenv>=1.0.1",
        "pydantic>=2.10.6",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "import-tally=main:main",
        ],
    },
)
