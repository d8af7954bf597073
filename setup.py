import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='nuru',
    version='0.1.0',
    description='Decoder for NURU character-grid images and palettes.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_namespace_packages(where='src', include=['nuru*']),
    package_dir={'': 'src'},
    install_requires=[
        'deal',
        'numpy',
        'Pillow',
        'PyYAML',
        'typer',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['nuru=nuru.runner:app'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Utilities'
    ],
    python_requires='>=3.8',
    keywords='nuru ansi ascii art terminal character grid image palette decode'
)
