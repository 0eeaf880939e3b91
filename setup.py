from setuptools import setup, find_packages
from codecs import open
from os import path


here = path.abspath(path.dirname(__file__))


with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

with open(path.join(here, 'ttbinio', '__init__.py')) as pkg:
    version_line, = (line for line in pkg if line.startswith('__version__'))
    __version__ = eval(version_line.split('=')[1])


setup(
    name='ttbinio',
    version=__version__,
    description='Decoder for TomTom GPS watch activity logs (*.ttbin)',
    long_description=long_description,
    author='Jordan Mackie',
    author_email='jmackie@protonmail.com',
    license='MIT',
    keywords='exercise running gps tomtom ttbin reverse-engineering',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Utilities',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],

    packages=find_packages(),
    install_requires=[
        'numpy>=1.11.1',
        'pandas>=0.18.1',
        'pytz>=2011',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'ttbin=ttbinio._util.cli:parse',
        ],
    },
)
