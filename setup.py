"""Setup configuration for delaunay_emst package."""

from setuptools import setup, find_packages
import os

# Read the README file for long description
def read_file(filename):
    filepath = os.path.join(os.path.dirname(__file__), filename)
    if os.path.exists(filepath):
        with open(filepath, 'r', encoding='utf-8') as f:
            return f.read()
    return ''

# Read requirements
def read_requirements(filename='requirements.txt'):
    filepath = os.path.join(os.path.dirname(__file__), filename)
    if os.path.exists(filepath):
        with open(filepath, 'r', encoding='utf-8') as f:
            return [line.strip() for line in f if line.strip() and not line.startswith('#')]
    return []

setup(
    name='delaunay_emst',
    version='0.1.0',
    author='Delaunay EMST Team',
    author_email='',
    description='Divide-and-conquer Delaunay triangulation and alpha-bounded Euclidean minimum spanning trees',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=find_packages(where='src') + ['scripts'],
    package_dir={'': 'src', 'scripts': 'scripts'},
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
    ],
    python_requires='>=3.9',
    install_requires=read_requirements(),
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'emst-run=scripts.run_emst:main',
            'emst-check=scripts.run_triangulation_check:main',
            'emst-generate=scripts.generate_points:main',
        ],
    },
)
