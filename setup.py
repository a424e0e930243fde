from setuptools import setup, find_packages
import os

_here = os.path.abspath(os.path.dirname(__file__))
version = {}

with open(os.path.join(_here, 'calverlex', 'version.py')) as f:
    exec(f.read(), version)

with open(os.path.join(_here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='calverlex',
    version=version['__version__'],
    description='Unbounded CalVer tags: ISO year, week and weekday followed by a letter suffix',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['calverlex', 'calverlex.*']),
    python_requires='>=3.9',
    install_requires=[
        'click>=8.0', 'click-log>=0.4.0', 'pydantic>=2.0', 'pyyaml>=5.3.1',
        'requests>=2.27', 'python-dotenv>=0.21',
    ],
    extras_require={
        'tests': ['pytest>=7.0,<9', 'pytest-mock>=3.10'],
    },
    entry_points={
        'console_scripts': ['calverlex=calverlex.__main__:main'],
    },
)
