
RELEASE_L = [ALPHA, BETA, CANDIDATE, FINAL] = ['alpha', 'beta', 'candidate', 'final']
RELEASE_LD = {ALPHA: 'a',
              BETA: 'b',
              CANDIDATE: 'rc',
              FINAL: ''}

# VERSION_INFO = (MAJOR, MINOR, CORRECTION, RELEASE_LEVEL, REVISION)
VERSION_INFO = (0, 1, 0, BETA, 1)
SERIES = SERIE = MAJOR = '.'.join(str(s) for s in VERSION_INFO[:2])
VERSION = '.'.join(str(s) for s in VERSION_INFO[:3]) + RELEASE_LD[VERSION_INFO[3]] + str(VERSION_INFO[4] or '')

PRODUCT_NAME = "attrcast"
DESCRIPTION = "Attribute typing for record objects."
LONG_DESC = '''attrcast casts, defaults and serializes record attributes.
Types expose cast/deserialize/serialize hooks, attributes may be virtual,
and custom types plug in by subclassing.
'''
CLASSIFIERS = """
Development Status :: 4 - Beta
License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)
Operating System :: OS Independent
Programming Language :: Python :: 3.10
Programming Language :: Python :: 3.11
Programming Language :: Python :: 3.12
"""
URL = "https://www.inphms.com"
AUTHOR = "INPHMS Team"
AUTHOR_EMAIL = "ian@inphms.com"
LICENSE = "LGPL-3"

MIN_PY_VERSION = (3, 10)
MAX_PY_VERSION = (3, 13)
