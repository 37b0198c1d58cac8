# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fstree",
    version="1.0.0",
    description="Recursive filesystem tree materialization with size, search and comparison helpers",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fstree", "fstree.*"]),
    python_requires=">=3.9",
    install_requires=[
        "watchdog>=2.1",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        'console_scripts': [
            'fstree=fstree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
