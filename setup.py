import io
import os
from os import path
import re

from setuptools import find_packages
from setuptools import setup

MYDIR = path.abspath(os.path.dirname(__file__))


def load_version():
    filename = path.join(MYDIR, 'typeuri', 'version.py')
    with io.open(filename, encoding='utf-8') as version_file:
        match = re.search(r"^__version__ = '([^']+)'", version_file.read(), re.M)
    return match.group(1)


setup(
    name='typeuri',
    version=load_version(),
    description='Convenience accessors for URIs: query multi-maps, path segments and scheme checks.',
    license='Apache 2.0',
    python_requires='>=3.8',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=['rfc3986>=1.4'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': [
            'typeuri-inspect = typeuri.cmd.inspect_uri:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries',
    ],
)
