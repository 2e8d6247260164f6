# -*- Mode: Python -*-
"""smartfee

This tool uses the official PyPa packaging and click recommendations:
https://github.com/pypa/sampleproject
https://packaging.python.org/en/latest/distributing.html
http://click.pocoo.org/4/setuptools/
"""
from setuptools import setup


install_requires = [
    'click',
    'requests',
]

version = __import__('smartfee').SMARTFEE_VERSION

setup(
    name='smartfee',
    version=version,
    description='Pay for dynamic fee bumping with Smart Fee and skip the change output.',
    url='https://smartfee.live',
    author='Smart Fee',
    license='MIT',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Office/Business :: Financial',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='bitcoin fee bumping bitgo withdrawals',

    packages=['smartfee',
              'smartfee.server',
              'smartfee.wallet',
    ],

    # List run-time dependencies here.  These will be installed by pip when
    # your project is installed.
    install_requires=install_requires,

    # List additional groups of dependencies here (e.g. development
    # dependencies). You can install these using the following syntax,
    # for example:
    # $ pip install -e .[dev,test]
    extras_require={
        'dev': ['flake8'],
        'test': ['pytest', 'coverage'],
    },

    # To provide executable scripts, use entry points in preference to the
    # "scripts" keyword.
    entry_points={
        'console_scripts': [
            'smartfee=smartfee.cli:main',
        ],
    },
)
