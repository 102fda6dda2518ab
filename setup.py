from setuptools import find_packages, setup


setup(
    name="gasketforge",
    version="0.1.0",
    description="Stadium gasket geometry with bolt hole layout (parameters -> DXF)",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "ezdxf>=1.1",
        "flask>=2.2",
        "numpy>=1.24",
        "shapely>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "gasketforge=gasketforge.cli:main",
            "gasketforge-server=gasketforge.server:main",
        ]
    },
)
