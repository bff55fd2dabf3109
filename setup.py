#!/usr/bin/env python

import os
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, "src/seqo/__version__.py")) as version_file:
    exec(version_file.read())

# Get the long description from the README file
with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

descript = 'A Python library for finding, describing and editing numbered ' \
           'sequences of names, such as image sequences and versioned files.'

setup(name='seqo',
      version=__version__,

      package_dir={'': 'src'},
      packages=find_packages('src'),

      test_suite="test.run",

      description=descript,
      long_description=long_description,
      long_description_content_type="text/markdown",

      license='MIT',

      python_requires='>=3.8',

      classifiers=[
        'Development Status :: 5 - Production/Stable',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
      ],

      keywords='file sequence frames image version collection',

      install_requires=[],
      )
