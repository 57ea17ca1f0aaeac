from setuptools import setup, find_packages

setup(
    name="datepicker-utils",
    version="1.0.0",
    description="Date comparison, range and formatting helpers for date picker components",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pendulum>=3.0.0",
        "pydantic>=2.11.7",
        "python-dotenv>=1.1.1",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
