from setuptools import setup

setup(
    name="dynamic_mst",
    version='1.0',
    description='Dynamic weighted graph with Kruskal minimum spanning forest queries',
    packages=["dynamic_mst"],
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "numba",
        "pydantic",
        "pydantic-settings",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["dynamic-mst=dynamic_mst.__main__:main"],
    },
)
