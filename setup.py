#####################
# Install fourcolor #
#####################

import setuptools

long_description = ('fourcolor is a graph- and map-coloring engine: it '
                    'colors an adjacency structure with greedy, DSATUR, '
                    'Welsh-Powell or backtracking search, validates '
                    'colorings and keeps a bounded undo/redo history.')

setuptools.setup(
    name='fourcolor',
    version='1.0.0',
    description='A graph-coloring and coloring-state engine',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers'],
    keywords=[
        'graph coloring',
        'map coloring',
        'four color theorem',
        'constraint satisfaction'],
    python_requires='>=3.8',
    install_requires=[
        'numpy >= 1.20',
    ],
    extras_require={
        'test': [
            'pytest >= 7.0',
            'z3-solver >= 4.8',
        ],
    },
    packages=setuptools.find_packages(exclude=['tests', 'examples']))
