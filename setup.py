# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="foldermap",
    version="1.0.0",
    description="Scan a directory tree and save a JSON summary of its files grouped by folder",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["foldermap*"]),
    python_requires=">=3.9",
    install_requires=[
        "rich>=13.0",  # Progress bar rendering
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'foldermap=foldermap.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
