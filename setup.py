#!/usr/bin/python
import re

from setuptools import setup

with open('corogen/__init__.py', encoding='utf-8') as fh:
    version = re.search(r"^__version__ = '([^']+)'", fh.read(), re.M).group(1)

setup(
    name='corogen',
    version=version,
    description='''
        Stackful bidirectional generators and self-referential coroutines
        built on greenlets.
    ''',
    long_description=open('README.txt').read(),
    author='Maries Ionel Cristian',
    author_email='ionel.mc@gmail.com',
    packages=['corogen', 'corogen.core'],
    zip_safe=True,
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    install_requires=['greenlet>=2.0'],
    extras_require={
        'test': ['pytest'],
    },
    test_suite='tests'
)
