from setuptools import setup, find_packages

setup(
    name="owner_du",
    version="0.1.0",
    description="Per-owner disk usage statistics with hardlink-aware counting.",
    author="Maxwell Carlson",
    author_email="carlsonamax@gmail.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "rich>=10.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "owner-du=owner_du.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "License :: OSI Approved :: MIT License",
    ],
)
