from setuptools import setup

with open('README.md', 'r') as f:
    long_description = f.read()

setup(
    name="cubesteps",
    version="0.1.0",
    description="Rubik's Cube solutions split into phases, from typed-in colors or photos",
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="MIT",
    python_requires=">= 3.8",
    packages=["cubesteps"],
    install_requires=[
        "numpy>=1.23.3",
        "rich>=13.0.1",
        "pydantic>=2.0.3",
        "requests>=2.28.2",
        "kociemba>=1.2.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "cubesteps = cubesteps:cli",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        'Programming Language :: Python :: 3 :: Only',
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
