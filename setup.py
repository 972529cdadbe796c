# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import find_packages, setup


setup(
  name='chartsvg',
  version='0.1.0',
  description='Server-side rendering of declarative chart descriptions to SVG.',
  python_requires='>=3.11',

  packages=find_packages(include=['chartsvg', 'chartsvg.*', 'utest']),
  install_requires=[
    'starlette',
    'uvicorn',
    'watchfiles',
  ],
  entry_points={
    'console_scripts': [
      'chartsvg=chartsvg.__main__:main',
      'utest=utest.__main__:main',
    ],
  },
)
