from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'configstore',
    version = '0.1.0',
    description = 'Runtime configuration aggregation from files, directory trees and environment variables',
    packages = find_packages(include=['configstore', 'configstore.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest', 'pytest-cov']
    }
)
