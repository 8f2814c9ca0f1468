"""
Setup script for installing the unipac CLI.
"""
from setuptools import setup, find_packages

setup(
    name='unipac',
    version='1.0.0',
    description='One CLI to search, install, upgrade and remove yay, flatpak and snap packages',
    author='Your Name',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'colorama>=0.4.6',
        'tabulate>=0.9.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'unipac=unipac.cli:main',
        ],
    },
    python_requires='>=3.7',
)
