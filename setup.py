from setuptools import setup, find_packages

setup(
    name="whitted-raytracer",
    version="1.0.0",
    description="Recursive Whitted ray tracer with groups, patterns and OBJ import",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "opencv-python>=4.5.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "raytracer=raytracer.main:main",
        ],
    },
    python_requires=">=3.8",
)
