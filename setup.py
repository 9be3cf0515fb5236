from setuptools import setup, find_packages

setup(
    name="andes",
    version="0.1.0",
    description="A desktop chat client for local Ollama servers using pywebview",
    author="Andes contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"andes": ["assets/*"]},
    install_requires=[
        "pywebview>=4.0",
        "requests",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["andes=andes.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
