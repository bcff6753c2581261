from setuptools import setup, find_packages

setup(
    name="argbind",
    version="0.1.0",
    description="Bind command-line flags, values and commands to typed targets.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="argbind contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "python-dateutil>=2.8",
        "python-json-logger>=3.1",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "argbind-demo=argbind.__main__:main_entry",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
