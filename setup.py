from setuptools import setup, find_packages

setup(
    name="wfs-alkis-import",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "geopandas",
        "shapely",
        "pyproj",
        "lxml",
        "pyyaml",
        "requests",
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    package_data={"": ["*.yml"]},
    python_requires=">=3.8",
)
