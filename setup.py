# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
TensorBridge build configuration.

Pure-Python package; the repository root *is* the ``tensorbridge``
package.

Build
-----
    pip install -e .                          # editable install
    pip install -e .[dev]                     # with the test runner
    python -m build                           # wheel

Runtime environment variables (see ``options.py``):
    TENSORBRIDGE_STRICT_LITERALS  — reject untagged numeric literals
    TENSORBRIDGE_CONVERT          — convert call results to host values
    TENSORBRIDGE_ONE_BASED        — 1-based ``extract`` subscripts
    TENSORBRIDGE_LOG_LEVEL        — level of the ``tensorbridge`` logger
"""
import os

from setuptools import setup

# ── Package metadata ──
_readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
try:
    with open(_readme, 'r', encoding='utf-8') as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = ''

setup(
    name='tensorbridge',
    version='0.1.0',
    author='Pictofeed, LLC',
    author_email='engineering@pictofeed.io',
    description=(
        'Cross-runtime adaptation layer for calling a Python ML framework '
        'with host-language idioms — marshalling, shapes, 1-based indices, '
        'object-keyed feeds and scoped contexts'
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://github.com/pictofeed/tensorbridge',
    license='Proprietary',

    package_dir={
        'tensorbridge': '.',
    },
    packages=[
        'tensorbridge',
    ],

    python_requires='>=3.11',
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: Other/Proprietary License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Artificial Intelligence',
        'Topic :: Software Development :: Libraries',
    ],
    zip_safe=False,
)
