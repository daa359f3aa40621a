from setuptools import setup, find_packages

setup(
  name='pytdma',
  version='0.0.1',
  description='Tridiagonal linear systems (Thomas algorithm) and tridiagonal determinants',
  long_description='Tridiagonal linear systems (Thomas algorithm) and tridiagonal determinants',
  classifiers=[
    'Development Status :: 3 - Alpha',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3.8',
    'Programming Language :: Python :: 3.9',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
    'Topic :: Scientific/Engineering :: Mathematics',
    "Operating System :: OS Independent",
  ],
  keywords='tridiagonal tdma thomas-algorithm linear-system determinant',
  author='Justin Lars Kirkby',
  author_email='jkirkby33@gmail.com',
  license='MIT',
  packages=find_packages(include=["tdma", "tdma.*"]),
  python_requires=">=3.8",
  install_requires=[
    "numpy",
  ],
  extras_require={
    "test": ["scipy", "pytest"]
  },
  include_package_data=True,
  zip_safe=False,
)
