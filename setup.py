from setuptools import setup, find_namespace_packages

setup(
    name="embedlog",
    version="0.1.0a0",
    description="Leveled printf-style logging into byte sinks for small devices",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["embedlog*"]),
    install_requires=[],
    extras_require={
        "serial": ["pyserial>=3.5"],
        "dev": ["pytest>=7", "pytest-cov", "pyserial>=3.5"],
        "test": ["pytest>=7", "pyserial>=3.5"],
    },
    entry_points={
        "console_scripts": [
            "embedlog=embedlog.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
        "Topic :: System :: Hardware",
    ],
    python_requires=">=3.10",
)
