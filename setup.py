"""gf2m setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import gf2m

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='gf2m',
    version=gf2m.__version__,
    description='gf2m -- Binary finite fields GF(2^m) in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite field', 'Galois field', 'binary field', 'GF(2^m)',
              'Reed-Solomon', 'erasure coding', 'secret sharing'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Security :: Cryptography',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=gf2m.__license__,
    packages=['gf2m'],
    platforms=['any'],
    python_requires='>=3.9',
    install_requires=['numpy>=1.22']
)
