#!/usr/bin/env python3

from setuptools import setup
from rsasign import __version__

def readme():
    with open("README.rst") as f:
        return f.read()


setup(name='rsasign',
      version='.'.join('{}'.format(x) for x in __version__),
      description='RSA (SHA-256, PKCS#1 v1.5) payload signer and signature verifier',
      long_description=readme(),
      long_description_content_type='text/x-rst',
      packages=['rsasign', 'rsasign.util'],
      python_requires='>=3.7',
      install_requires=[
          'rsa>=4.7',
          'cryptography',
          'docopt',
      ],
      extras_require={
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': [
              'rsa-signer = rsasign.signer:main',
              'rsa-verifier = rsasign.verifier:main',
          ],
      },
      classifiers=[
          'Development Status :: 3 - Alpha',
          'License :: OSI Approved :: MIT License',
          'Operating System :: OS Independent',
          'Programming Language :: Python :: 3',
          'Topic :: Security',
          'Topic :: Security :: Cryptography',
      ]
)
