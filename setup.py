# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A minimal embeddable Lisp: reader, environments and a tree-walking evaluator",
    packages=find_packages(include=["minilisp", "minilisp.*", "minilisp_lsp", "minilisp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6.84",
        ],
    },
    entry_points={
        "console_scripts": [
            "minilisp=minilisp.repl:main",
            "minilisp-ls=minilisp_lsp.server:main",
        ],
    },
    zip_safe=False,
)
