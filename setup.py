import ast
import os

from setuptools import setup

# Read the package docstring without importing the package, its dependencies may not be installed yet.
with open(os.path.join('src', 'satwindow', '__init__.py'), encoding='utf-8') as f:
    docstring = ast.get_docstring(ast.parse(f.read()))

description, long_description = docstring.split('\n', 1)

setup(
    name='satwindow',
    version='0.1.0',
    author="Quinton Barnes",
    author_email="devqbizzle68@gmail.com",
    description=description,
    long_description=long_description,
    long_description_content_type='text',
    license='MIT',
    url='https://github.com/qbizzle68/satwindow',
    python_requires='>=3.10',
    install_requires=['pyevspace>=0.13.0,<0.15', 'sgp4>=2.20', 'requests'],
    extras_require={'test': ['pytest']},
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Astronomy'
    ],
    packages=['satwindow', 'satwindow.core', 'satwindow.util', 'satwindow.orbit', 'satwindow.bodies',
              'satwindow.satellitepass'],
    package_dir={'': 'src'},
)
