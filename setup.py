#!/usr/bin/env python
"""
kestrel
=======

kestrel is a small Python client for `Sentry <http://getsentry.com/>`_.
It turns exceptions and messages into signed event packets and posts them
to a Sentry store endpoint, one synchronous attempt per capture, without
ever letting a delivery failure reach the host application.
"""

from setuptools import setup, find_packages
import re
import ast


_version_re = re.compile(r'VERSION\s+=\s+(.*)')

with open('kestrel/__init__.py', 'rb') as f:
    version = str(ast.literal_eval(_version_re.search(
        f.read().decode('utf-8')).group(1)))


install_requires = []

requests_requires = [
    'requests',
]

tests_require = [
    'exam>=0.5.2',
    'flake8',
    'mock',
    'pytest',
    'pytest-timeout',
    'responses',
] + requests_requires


setup(
    name='kestrel',
    version=version,
    author='Sentry',
    author_email='hello@getsentry.com',
    description='kestrel is a client for Sentry (https://getsentry.com)',
    long_description=__doc__,
    packages=find_packages(exclude=("tests", "tests.*",)),
    zip_safe=False,
    python_requires='>=3.6',
    extras_require={
        'requests': requests_requires,
        'tests': tests_require,
    },
    license='BSD',
    install_requires=install_requires,
    include_package_data=True,
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python',
        'Topic :: Software Development',
    ],
)
