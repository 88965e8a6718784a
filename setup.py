#!/usr/bin/env python
import codecs
import os.path
import re

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    return codecs.open(os.path.join(here, *parts), 'r', encoding='utf-8').read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


install_requires = [line.strip() for line in read('requirements.txt').splitlines()
                    if line.strip() and not line.startswith('#')]

setup(
    name='intraline',
    version=find_version("intraline", "__init__.py"),
    description='Word-level highlighting of what changed inside modified lines of a diff.',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    keywords='diff word-diff intraline highlight inline changes',
    zip_safe=True,
    packages=find_packages(include=['intraline', 'intraline.*'], exclude=['intraline.tests', 'intraline.tests.*']),
    install_requires=install_requires,
    extras_require={'test': ['pytest']},
    license="Apache License 2.0",
    python_requires=">= 3.10",
    classifiers=['Intended Audience :: Developers',
                 'Programming Language :: Python :: 3',
                 'Topic :: Software Development :: Version Control',
                 'Topic :: Text Processing',
                 'Topic :: Utilities'
                 ],
)
