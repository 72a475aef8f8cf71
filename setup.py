from setuptools import find_namespace_packages, setup

setup(
    name="drawgraph",
    version="0.1.0",
    description="Composite tree of drawable shapes with uniform draw/rotate/count operations",
    python_requires=">=3.12",
    # packages have no __init__.py, so collect them as namespace packages
    packages=find_namespace_packages(include=["drawgraph", "drawgraph.*"]),
    install_requires=[
        "numpy",
        "opencv-python",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "drawgraph-demo = drawgraph.composite_demo:main",
        ],
    },
)
