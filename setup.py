from setuptools import setup, find_packages

setup(
    name="pixel-astar",
    version="1.0.0",
    packages=find_packages(include=["pixel_astar", "pixel_astar.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "PyYAML>=6.0",
        "pandas>=1.4.0",
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    author="pixel-astar Team",
    description="A* pathfinding through the walkable pixels of an image",
    python_requires=">=3.8",
)
