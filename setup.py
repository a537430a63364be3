"""Sample from common probability distributions and compute summary
statistics and histograms from the command line. Every subcommand
reads and writes one number per line, so they compose with pipes.

BSD-licensed, see LICENSE for more details.
"""

from setuptools import setup, find_packages


__version__ = '0.2.0'
__license__ = 'BSD'

desc = ('Sample from common distributions and calculate summary'
        ' statistics from the command line.')


setup(name='samplers',
      version=__version__,
      description=desc,
      long_description=__doc__,
      packages=find_packages(),
      install_requires=['boltons>=20.0.0', 'numpy>=1.17'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['samplers = samplers.cli:console_main']},
      include_package_data=True,
      zip_safe=False,
      license=__license__,
      platforms='any',
      python_requires='>=3.6',
      classifiers=[
          'Intended Audience :: Science/Research',
          'Environment :: Console',
          'Topic :: Scientific/Engineering :: Mathematics',
          'Topic :: Utilities',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: Implementation :: CPython',
          'Programming Language :: Python :: Implementation :: PyPy',
      ]
)


"""
A brief checklist for release:

* pytest
* git commit (if applicable)
* Bump setup.py and samplers/__init__.py versions off of -dev
* git commit -a -m "bump version for x.y.z release"
* python -m build && twine upload dist/*
* git commit
* git tag -a x.y.z -m "brief summary"
* write CHANGELOG
* git commit
* bump versions onto n+1 dev
* git commit
* git push

"""
