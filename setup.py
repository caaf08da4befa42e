#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes']
test_requires = ['pytest', 'tabulate']

setup(
    name='transducers',
    version='0.5.0',
    author='Andrew Thomson',
    author_email='athomsonguy@gmail.com',
    packages=['transducers'],
    install_requires = requires,
    tests_require = test_requires,
    extras_require = {'test': test_requires},
    url='http://github.com/andrewguy9/transducers',
    license='MIT',
    description='composable algorithmic transformations, independent of their source and accumulation.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
