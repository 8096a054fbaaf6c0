#!/usr/bin/env python
from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(name='gpreg',
      version='0.1.0',
      author='Emmanuel Vazquez',
      author_email='emmanuel.vazquez@centralesupelec.fr',
      description='GPreg: Gaussian process regression with regularized Cholesky factorizations',
      long_description=long_description,
      long_description_content_type="text/markdown",
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
          "Operating System :: OS Independent",
      ],
      packages=['gpreg', 'gpreg.num', 'gpreg.geometry', 'gpreg.kernel', 'gpreg.core'],
      license='LICENSE.txt',
      install_requires=[
             "numpy",
             "scipy>=1.8.0",
         ],
      extras_require={
             "test": ["pytest"],
         },
      python_requires=">=3.8",
      )
