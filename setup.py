#!/usr/bin/env python
# ruff: noqa: F821

from setuptools import find_packages, setup
from os.path import join, dirname

exec(open(join(dirname(__file__), 'attrcast', 'release.py'), 'rb').read())
library_name = 'attrcast'

setup(
    name=library_name,
    version=VERSION,
    description=DESCRIPTION,
    long_description=LONG_DESC,
    url=URL,
    author=AUTHOR,
    author_email=AUTHOR_EMAIL,
    classifiers=[c for c in CLASSIFIERS.split('\n') if c],
    license=LICENSE,
    packages=find_packages(include=[library_name, library_name + '.*']),
    include_package_data=True,
    install_requires=[
        'python-dateutil',
        'pytz',
    ],
    python_requires='>=' + ".".join(map(str, MIN_PY_VERSION)),
    extras_require={
        'test': [
            'freezegun',
            'pytest',
        ],
    },
)
