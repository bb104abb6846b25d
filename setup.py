from setuptools import setup, find_packages

setup(
    name="dbusctl",
    version="0.1.0",
    description="Command-line utility for calling D-Bus methods with typed arguments",
    author="Michael",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "dbus-fast>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "dbusctl=dbusctl.cli:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Framework :: AsyncIO",
        "Operating System :: POSIX :: Linux",
    ],
)
