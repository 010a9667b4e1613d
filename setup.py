import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

VERSION = '0.0.1'
PACKAGE_NAME = 'gof2'
AUTHOR = 'The gof2 developers'

LICENSE = 'MIT'
DESCRIPTION = 'gof2 is a Python 3 library to build, convert and multiply matrices over GF(2) and GF(2)[x], with sparse, dense and structural (identity, zero, rotation, shift) representations.'
LONG_DESCRIPTION = (HERE / "README.rst").read_text(encoding='utf-8')
LONG_DESC_TYPE = "text/x-rst"

INSTALL_REQUIRES = [
    'sympy',
    ]

EXTRAS_REQUIRE = {
    'test': [
        'hypothesis',
        'pytest',
        ],
    }


setup(
    name=PACKAGE_NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type=LONG_DESC_TYPE,
    author=AUTHOR,
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    license=LICENSE,
    packages=find_packages(),
    include_package_data=True,
)
