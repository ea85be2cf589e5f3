#!/usr/bin/env python3
"""
Setup script for zinc-util
"""

from setuptools import setup, find_packages
import os

# Read version from package
def read_version():
   """Read version from package __init__.py"""
   with open('zinc_util/__init__.py', 'r') as f:
      for line in f:
         if line.startswith('__version__'):
            return line.split('=')[1].strip().strip('"\'')
   return '0.1.0'

# Read long description from README
def read_long_description():
   """Read long description from README.md"""
   if os.path.exists('README.md'):
      with open('README.md', 'r', encoding='utf-8') as f:
         return f.read()
   return ''

# Read requirements from requirements.txt
def read_requirements():
   """Read requirements from requirements.txt"""
   requirements = []
   if os.path.exists('requirements.txt'):
      with open('requirements.txt', 'r') as f:
         for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
               requirements.append(line)
   return requirements

setup(
   name='zinc-util',
   version=read_version(),
   description='Support utilities for build tool wrappers',
   long_description=read_long_description(),
   long_description_content_type='text/markdown',
   author='zinc-util Team',
   packages=find_packages(exclude=['tests', 'tests.*']),
   package_data={
      'zinc_util.resources': ['*.properties'],
   },
   python_requires='>=3.9',
   install_requires=read_requirements() or [
      'PyYAML>=6.0',
      'rich>=12.0.0',
      'tabulate>=0.9.0',
   ],
   extras_require={
      'dev': [
         'pytest>=7.0.0',
         'pytest-cov>=4.0.0',
         'black>=22.0.0',
         'flake8>=5.0.0',
         'mypy>=0.991',
      ],
   },
   entry_points={
      'console_scripts': [
         'zinc-util=zinc_util.cli.main:main',
      ],
   },
   classifiers=[
      'Development Status :: 3 - Alpha',
      'Intended Audience :: Developers',
      'License :: OSI Approved :: MIT License',
      'Operating System :: OS Independent',
      'Programming Language :: Python :: 3',
      'Programming Language :: Python :: 3.9',
      'Programming Language :: Python :: 3.10',
      'Programming Language :: Python :: 3.11',
      'Topic :: Software Development :: Build Tools',
   ],
   keywords='build tools timer logging debug',
   include_package_data=True,
   zip_safe=False,
)
