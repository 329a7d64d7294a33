'''
pydigraph: directed graphs with traversals, dominators and SCCs

Tests are run with pytest: pip install -e .[test] && pytest

Copyright 2014, Romain Gaucher.
Licensed under APACHE.
'''
from setuptools import setup, find_packages


version = "0.1"

setup(name="pydigraph",
      version=version,
      description="Directed graphs with traversals, dominators and strongly connected components",
      long_description=open("README.rst").read(),
      classifiers=[ # Get strings from http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3'
      ],
      keywords="graph dominators scc tarjan traversal", # Separate with spaces
      author="Romain Gaucher",
      author_email="r@rgaucher.info",
      license="APACHE",
      packages=find_packages(exclude=['examples', 'tests']),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.7',
      install_requires=[],
      extras_require={
        'test': ['pytest'],
      }
)
